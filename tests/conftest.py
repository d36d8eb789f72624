import logging

import pytest

from propsync.logger import APP_LOGGER_NAME

BASE_FILENAME = "messages_en_GB.properties"

ENGLISH = [
    "# English properties",
    "greeting=Hello",
    "farewell=Goodbye",
    "welcome=Welcome",
    "# More properties",
    "help=Help",
]

FRENCH = [
    "# French properties",
    "greeting=Bonjour",
    "farewell=Au revoir",
    "# More properties",
    "help=Aide",
]

GERMAN = [
    "# German properties",
    "greeting=Hallo",
]


def write(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture
def locale_dir(tmp_path):
    """A directory with an English base file and French and German translations."""
    write(tmp_path / BASE_FILENAME, ENGLISH)
    write(tmp_path / "messages_fr.properties", FRENCH)
    write(tmp_path / "messages_de.properties", GERMAN)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI installs so they never outlive a captured stdout."""
    yield
    logger = logging.getLogger(APP_LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

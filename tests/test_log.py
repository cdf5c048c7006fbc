import logging

import pytest

from cube_wireframe.log import setup_default_logging


@pytest.fixture
def bare_root():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    for h in root.handlers:
        h.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def test_configures_bare_root(bare_root):
    setup_default_logging("debug")
    assert bare_root.handlers
    assert bare_root.level == logging.DEBUG


def test_file_handler(bare_root, tmp_path):
    path = tmp_path / "cube.log"
    setup_default_logging(logging.WARNING, filename=str(path))
    logging.getLogger("cube_wireframe.test").warning("hello")
    for h in bare_root.handlers:
        h.flush()
    assert "[WARNING] cube_wireframe.test: hello" in path.read_text()


def test_keeps_existing_configuration(bare_root):
    handler = logging.NullHandler()
    bare_root.addHandler(handler)
    setup_default_logging("DEBUG")
    assert bare_root.handlers == [handler]

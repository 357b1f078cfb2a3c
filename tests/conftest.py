"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from objc_type_encoding.domain.models.objc import ClassInfo
from objc_type_encoding.infrastructure.logging import LoggerSetup

CONFIG_ENV_VARS = (
    "OUTPUT_PATH",
    "VERBOSE",
    "LOG_DIR",
    "INDENT_WIDTH",
    "OBJC_ENCODING_MAX_NESTING_DEPTH",
    "OBJC_ENCODING_FIELD_PLACEHOLDER_PREFIX",
    "OBJC_ENCODING_DEFAULT_INDENT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """
    Isolate tests from the developer's environment.

    Clears configuration variables and runs each test from an empty
    directory so no stray .env file is picked up.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Allow LoggerSetup.initialize() to run fresh and undo it afterwards."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()


@pytest.fixture
def sample_class_data() -> dict:
    """Class description in the layout accepted by ClassInfo.from_dict()."""
    return {
        "name": "MyView",
        "superclass": "NSView",
        "protocols": ["NSCoding", "NSCopying"],
        "ivars": [
            {"name": "_title", "type": '@"NSString"', "offset": 8},
            {"name": "_frame", "type": "{CGRect={CGPoint=dd}{CGSize=dd}}", "offset": 16},
            {"name": "_flags", "type": "b3", "offset": 48},
            {"name": "_enabled", "type": "c", "offset": 49},
        ],
        "class_properties": [
            {"name": "sharedView", "attributes": 'T@"MyView",R,N'},
        ],
        "properties": [
            {"name": "title", "attributes": 'T@"NSString",C,N,V_title'},
            {"name": "frame", "attributes": "T{CGRect={CGPoint=dd}{CGSize=dd}},N,V_frame"},
        ],
        "class_methods": [
            {"name": "sharedView", "type": "@16@0:8"},
        ],
        "methods": [
            {"name": "title", "type": "@16@0:8"},
            {"name": "setTitle:", "type": "v24@0:8@16"},
            {"name": "initWithFrame:style:", "type": "@56@0:8{CGRect={CGPoint=dd}{CGSize=dd}}16q48"},
        ],
    }


@pytest.fixture
def sample_class(sample_class_data: dict) -> ClassInfo:
    """ClassInfo built from sample_class_data."""
    return ClassInfo.from_dict(sample_class_data)

import os
import threading
import time
from unittest.mock import Mock

import pytest

from phosphor_icons.core.models import Icon, IconStyle
from phosphor_icons.icons.extractor import extract_path_data
from phosphor_icons.icons.loader import MappingResourceBundle
from phosphor_icons.icons.locator import locate
from phosphor_icons.icons.service import IconService, set_default_service
from phosphor_icons.utils.config import ENV_VARS, SETTINGS_FILE_ENV

HOUSE_PATH = "M40 112L128 32L216 112L216 224L40 224Z"
CHECK_PATH = "M0 0L10 10"


def make_svg(path_data: str) -> bytes:
    return f'<svg xmlns="http://www.w3.org/2000/svg"><path d="{path_data}"/></svg>'.encode()


class CountingExtractor:
    """Extractor stub that counts invocations and can be slowed down."""

    def __init__(self, delay: float = 0.0, error: Exception = None):
        self.delay = delay
        self.error = error
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self, stream, icon=None, style=None):
        with self._lock:
            self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return extract_path_data(stream, icon, style)


class CountingBundle(MappingResourceBundle):
    """In-memory bundle that records requested keys."""

    def __init__(self, documents):
        super().__init__(documents)
        self.requests = []

    def get_resource(self, key):
        self.requests.append(key)
        return super().get_resource(key)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for env_var in [*ENV_VARS.values(), SETTINGS_FILE_ENV]:
        monkeypatch.setenv(env_var, "")
        monkeypatch.delenv(env_var)
    yield
    set_default_service(None)


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtGui import QGuiApplication

    app = QGuiApplication.instance() or QGuiApplication([])
    yield app


@pytest.fixture
def bundle():
    return CountingBundle(
        {
            locate(Icon.HOUSE, IconStyle.REGULAR): make_svg(HOUSE_PATH),
            locate(Icon.HOUSE, IconStyle.BOLD): make_svg(HOUSE_PATH),
            locate(Icon.CHECK, IconStyle.REGULAR): make_svg(CHECK_PATH),
            locate(Icon.PLUS, IconStyle.REGULAR): b"<svg><path d='M0 0L1 1'/></svg>",
            locate(Icon.X, IconStyle.REGULAR): make_svg("M0 0 Q"),
        }
    )


@pytest.fixture
def extractor():
    return CountingExtractor()


@pytest.fixture
def service(bundle, extractor):
    return IconService(bundle=bundle, extractor=extractor)


@pytest.fixture
def mock_stream():
    def _make(data: bytes):
        stream = Mock()
        stream.read.return_value = data
        return stream

    return _make

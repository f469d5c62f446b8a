import pytest
from unittest.mock import MagicMock

from library import LibraryManager
from notifications import EmailNotifier

@pytest.fixture
def notifier():
    # Records every send() call instead of emailing anyone
    return MagicMock(spec=EmailNotifier)

@pytest.fixture
def lib(notifier):
    return LibraryManager(notifier)

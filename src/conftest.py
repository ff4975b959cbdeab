import logging

import pytest
from requests.adapters import HTTPAdapter

logger = logging.getLogger(__name__)


class BlockedHTTPError(RuntimeError):
    pass


def _blocked_send(adapter, request, *args, **kwargs):
    logger.warning('Blocked unmocked %s %s', request.method, request.url)
    raise BlockedHTTPError(
        'Unmocked HTTP request to %s, use responses or patch the client'
        % request.url
    )


@pytest.fixture(scope='session', autouse=True)
def block_unmocked_requests():
    """
    Every outgoing HTTP call in the suite must be mocked. `responses`
    patches the adapter on top of this, so mocked calls still go through.
    """
    patcher = pytest.MonkeyPatch()
    patcher.setattr(HTTPAdapter, 'send', _blocked_send)
    yield
    patcher.undo()

from typing import Dict

import pytest

from payloads import MUSE_PAYLOAD, REMOTEOK_PAYLOAD, REMOTIVE_PAYLOAD, Handler, json_handler


@pytest.fixture
def all_up_routes() -> Dict[str, Handler]:
    return {
        "remotive.com": json_handler(REMOTIVE_PAYLOAD),
        "www.themuse.com": json_handler(MUSE_PAYLOAD),
        "remoteok.com": json_handler(REMOTEOK_PAYLOAD),
    }

import json

import pytest


class DummyResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.text = text if text is not None else json.dumps(payload)
        self.status_code = status_code
        self.content = self.text.encode("utf-8")

    def json(self):
        return json.loads(self.text)


MEDUSA_ITEMINFO = {
    "defindex": 7,
    "paintindex": 282,
    "paintseed": 561,
    "floatvalue": 0.23,
    "weapon_type": "AWP",
    "item_name": "Medusa",
    "full_item_name": "AWP | Medusa (Well-Worn)",
    "stickers": [],
}

MEDUSA_RECORD = (
    '{"Item Name":"AWP","Name Tag":null,"Paint Kit":282,"Paint Kit Name":"Medusa",'
    '"Seed":561,"Stickers":[],"Weapon ID":7,"Wear":0.23},\n'
)

INSPECT_TEMPLATE = (
    "steam://rungame/730/76561202255233023/+csgo_econ_action_preview%20"
    "S%owner_steamid%A%assetid%D4649164380290465734"
)


@pytest.fixture
def medusa_payload():
    return {"iteminfo": dict(MEDUSA_ITEMINFO)}


@pytest.fixture
def api_error_payload():
    return {"error": "Invalid inspect link", "code": 21, "status": 400}


@pytest.fixture
def inventory_payload():
    """Three owned items: two stacked on one description, one renamed."""
    return {
        "success": True,
        "rgInventory": {
            "111": {"id": "111", "classid": "310776", "instanceid": "302028390"},
            "222": {"id": "222", "classid": "310776", "instanceid": "302028390"},
            "333": {"id": "333", "classid": "506856", "instanceid": "188530139"},
        },
        "rgDescriptions": {
            "310776_302028390": {
                "appid": "730",
                "classid": "310776",
                "instanceid": "302028390",
                "actions": [{"name": "Inspect in Game...", "link": INSPECT_TEMPLATE}],
            },
            "506856_188530139": {
                "appid": "730",
                "classid": "506856",
                "instanceid": "188530139",
                "fraudwarnings": ["Name Tag: ''hello''"],
                "actions": [{"name": "Inspect in Game...", "link": INSPECT_TEMPLATE}],
            },
        },
    }


@pytest.fixture
def log_messages():
    from loguru import logger

    messages = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)

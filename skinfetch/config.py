from __future__ import annotations

import os


# ---------------------------
# External endpoints
# ---------------------------

# Inspection API, see https://github.com/csgofloat/inspect
INSPECT_API_URL = os.getenv("SKINFETCH_INSPECT_API", "https://api.csgofloat.com/")

# Legacy community inventory listing (app 730, context 2)
INVENTORY_BY_HANDLE_URL = os.getenv(
    "SKINFETCH_INVENTORY_BY_HANDLE",
    "https://steamcommunity.com/id/{handle}/inventory/json/730/2",
)
INVENTORY_BY_ID_URL = os.getenv(
    "SKINFETCH_INVENTORY_BY_ID",
    "https://steamcommunity.com/profiles/{steam_id}/inventory/json/730/2",
)


# ---------------------------
# HTTP hardening
# ---------------------------

HTTP_CONNECT_TIMEOUT = float(os.getenv("SKINFETCH_CONNECT_TIMEOUT", "5.0"))
HTTP_READ_TIMEOUT = float(os.getenv("SKINFETCH_READ_TIMEOUT", "20.0"))
HTTP_MAX_REDIRECTS = 3

HTTP_USER_AGENT = "skinfetch/1.0 (+https://github.com/skinfetch/skinfetch)"


# ---------------------------
# Batch policy
# ---------------------------

# Pause between inventory items so the public APIs don't rate limit us
DEFAULT_REQUEST_DELAY = 0.5
REQUEST_DELAY_SECONDS = float(
    os.getenv("SKINFETCH_REQUEST_DELAY", str(DEFAULT_REQUEST_DELAY))
)

DEFAULT_ITEM_LIMIT = 50


# ---------------------------
# Inventory link templates / name tags
# ---------------------------

OWNER_PLACEHOLDER = "%owner_steamid%"
ASSET_PLACEHOLDER = "%assetid%"

# Fraud warnings look like: Name Tag: ''some text''
NAME_TAG_PREFIX = "Name Tag: ''"
NAME_TAG_DELIMITER = "''"


# ---------------------------
# Target config file
# ---------------------------

ITEMS_MARKER = '"Items": ['
BACKUP_SUFFIX = ".old"

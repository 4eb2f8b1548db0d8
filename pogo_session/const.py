"""Protocol constants for the game RPC service.

The envelope fingerprint values below must match what the server expects
from this client generation. Changing any of them makes the server reject
or silently ignore requests.
"""

from __future__ import annotations

from typing import Final

# Shared bootstrap endpoint used until the server assigns a dedicated host
DEFAULT_URL: Final = "https://pgorelease.nianticlabs.com/plfe/rpc"

# Dedicated endpoint built from the api_url fragment of the first response
RPC_URL_TEMPLATE: Final = "https://{}/rpc"

# Settings version advertised in every DOWNLOAD_SETTINGS sub-request
DOWNLOAD_SETTINGS_HASH: Final = "05daf51635c82611d1aac95c0b051d3ec088a930"

# Resolution of the spatial cells reported around the player
CELL_ID_LEVEL: Final = 15

# Envelope fingerprint, must match server expectation
REQUEST_ID: Final = 8145806132888207460
REQUEST_STATUS_CODE: Final = 2
REQUEST_UNKNOWN12: Final = 989

# Marker carried next to the access token in AuthInfo, must match server expectation
AUTH_TOKEN_UNKNOWN2: Final = 59

USER_AGENT: Final = "Niantic App"

DEFAULT_TIMEOUT: Final = 30.0

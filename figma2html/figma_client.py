import logging
import time

import requests

from figma2html.errors import FigmaAPIError

logger = logging.getLogger(__name__)

BASE_URL = "https://api.figma.com/v1"


class FigmaClient:
    def __init__(self, token, base_url=BASE_URL, timeout=30):
        self.base_url = base_url
        self.timeout = timeout
        self.headers = {
            "X-Figma-Token": token
        }

    def _get(self, endpoint, params=None):
        url = f"{self.base_url}{endpoint}"
        response = requests.get(url, headers=self.headers, params=params, timeout=self.timeout)

        # Retry once on 429
        if response.status_code == 429:
            retry_after = int(response.headers.get("Retry-After", 60))
            logger.warning("Rate limited on %s. Waiting %s seconds...", endpoint, retry_after)
            time.sleep(retry_after)
            response = requests.get(url, headers=self.headers, params=params, timeout=self.timeout)

        if not response.ok:
            raise FigmaAPIError(endpoint, response.status_code, response.text)
        return response.json()

    def get_file(self, file_key):
        """
        Fetches the Figma file content (the whole document tree).
        """
        logger.info("Fetching Figma file %s", file_key)
        return self._get(f"/files/{file_key}")

    def get_images(self, file_key, ids, format="png", scale=2):
        """
        Get rendered images for specific nodes.
        ids: list of node IDs (strings)
        format: 'png', 'jpg', 'svg', 'pdf'
        Returns {"images": {node_id: url}, "err": ...}; the URLs expire.
        """
        params = {"ids": ",".join(ids), "format": format, "scale": str(scale)}
        logger.info("Requesting %s renders for %d node(s)", format, len(ids))
        return self._get(f"/images/{file_key}", params=params)

from typing import Any, List, Optional

import httpx
import structlog
from pydantic import ValidationError

from app.core.exceptions import DiscountLookupError
from app.schemas.product import DiscountRule

logger = structlog.get_logger(__name__)


class DiscountClient:
    """
    Reads discount rules from the external discount API.

    Every call hits the API; rules are never cached and failed calls are
    not retried. Only the rule that matches is validated, so a broken
    entry for another discount type doesn't affect the lookup.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None,
    ):
        self.url = url
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout)
        self._log = logger.bind(url=url)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def fetch_rules(self) -> List[Any]:
        """Raw rule list as returned by the API."""
        try:
            response = self._client.get(self.url)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._log.error("discount_api_request_failed", error=str(e))
            raise DiscountLookupError("Discount API request failed") from e
        except ValueError as e:
            self._log.error("discount_api_invalid_json", error=str(e))
            raise DiscountLookupError("Discount API returned invalid JSON") from e

        if not isinstance(payload, list):
            self._log.error("discount_api_malformed_payload", payload_type=type(payload).__name__)
            raise DiscountLookupError("Discount API returned a malformed payload")
        return payload

    def fetch_discount_info(self, discount_type: str) -> Optional[DiscountRule]:
        """First rule whose id equals `discount_type`, or None."""
        for item in self.fetch_rules():
            if not isinstance(item, dict) or str(item.get("id")) != discount_type:
                continue
            try:
                return DiscountRule.model_validate(item)
            except ValidationError as e:
                self._log.error(
                    "discount_api_malformed_rule",
                    discount_type=discount_type,
                    errors=e.error_count(),
                )
                raise DiscountLookupError("Discount API returned a malformed rule") from e
        return None

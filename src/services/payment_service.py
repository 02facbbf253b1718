"""Hand-off to the Venmo app for settling up outside the ledger."""

from collections.abc import Callable
from typing import NamedTuple
import webbrowser

from loguru import logger

VENMO_APP_URL = "venmo://"
VENMO_STORE_URL = "https://apps.apple.com/us/app/venmo/id351727428"


class PaymentLinks(NamedTuple):
    app_url: str
    fallback_url: str


def payment_links() -> PaymentLinks:
    """Deep link plus store page, for a client that opens them itself."""
    return PaymentLinks(app_url=VENMO_APP_URL, fallback_url=VENMO_STORE_URL)


def open_payment_app(launcher: Callable[[str], bool] = webbrowser.open) -> str:
    """Open the Venmo app on this machine, or its store page as a fallback.

    Returns the URL that was handed to the launcher. Nothing comes back from
    the payment app.

    ``webbrowser.open`` returns True once any browser accepts the URL, even if
    nothing is registered for ``venmo://``, so on a desktop the store page is
    only reached when no browser is available at all. Clients on another
    device should use ``payment_links`` and do the fallback themselves.
    """
    links = payment_links()
    if launcher(links.app_url):
        logger.info("Opened Venmo app")
        return links.app_url

    logger.info("Venmo app unavailable, opening store page")
    launcher(links.fallback_url)
    return links.fallback_url

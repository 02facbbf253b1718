from fastapi import APIRouter
from loguru import logger

from src.schemas.schemas import PaymentLinkResponse, PaymentLinksResponse
from src.services.payment_service import open_payment_app, payment_links

router = APIRouter()


@router.get("/venmo", response_model=PaymentLinksResponse)
def read_venmo_links() -> PaymentLinksResponse:
    """Return the Venmo deep link and store page for the client to open."""
    links = payment_links()
    return PaymentLinksResponse(
        app_url=links.app_url, fallback_url=links.fallback_url
    )


@router.post("/venmo", response_model=PaymentLinkResponse)
def open_venmo() -> PaymentLinkResponse:
    """Open Venmo on the server's own machine, falling back to its store page."""
    logger.info("Payment app requested")
    return PaymentLinkResponse(opened=open_payment_app())

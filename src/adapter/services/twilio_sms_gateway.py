import logging

import httpx

from src.app.services.sms_gateway import ISmsGateway, SmsDeliveryError

logger = logging.getLogger(__name__)


class TwilioSmsGateway(ISmsGateway):
    """Twilio Programmable Messaging over the REST API"""

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        from_number: str,
        api_url: str = "https://api.twilio.com/2010-04-01",
        timeout: float = 30.0,
    ):
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.from_number = from_number
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.account_sid and self.auth_token and self.from_number)

    async def send(self, to: str, body: str) -> str:
        url = f"{self.api_url}/Accounts/{self.account_sid}/Messages.json"
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(
                    url,
                    data={"To": to, "From": self.from_number, "Body": body},
                    auth=(self.account_sid, self.auth_token),
                )
            except httpx.HTTPError as exc:
                raise SmsDeliveryError(f"Twilio request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError:
            payload = response.text

        if response.is_error:
            raise SmsDeliveryError(
                f"Twilio error: {response.status_code}", provider_response=payload
            )

        return payload.get("sid", "") if isinstance(payload, dict) else ""

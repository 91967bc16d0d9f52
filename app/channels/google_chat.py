"""Google Chat incoming webhook channel."""

import json
import logging
import re
from datetime import datetime, tzinfo, timezone

import httpx
from pydantic import ValidationError

from app.channels.base import BaseChannel
from app.errors import ParseError, ReadError, RemoteError, ResponseParseError, TransportError
from app.models.chat import GoogleChatResponse
from app.models.incident import Incident

logger = logging.getLogger(__name__)

MESSAGE_TEMPLATE = """
{
    "cards": [
        {
            "header": {
                "title": "<users/all> Google Cloud Monitoring Alert"
            },
            "sections": [
                {
                    "header": "{alertName}",
                    "widgets": [
                        {
                            "textParagraph": {
                                "text": "<b>Started at:</b> {startedAt}"
                            }
                        }
                    ]
                },
                {
                    "header": "<b><font color=\\"#ff0000\\">Received log</font></b>",
                    "widgets": [
                        {
                            "textParagraph": {
                                "text": "{logMessage}"
                            }
                        }
                    ]
                },
                {
                    "widgets": [
                        {
                            "keyValue": {
                                "topLabel": "Status",
                                "content": "{status}"
                            }
                        }
                    ]
                },
                {
                    "widgets": [
                        {
                            "buttons": [
                                {
                                    "textButton": {
                                        "text": "GO TO INCIDENT",
                                        "onClick": {
                                            "openLink": {
                                                "url": "{incidentURL}"
                                            }
                                        }
                                    }
                                }
                            ]
                        }
                    ]
                }
            ]
        }
    ]
}
"""

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_message(message: str, replacements: list[tuple[str, str]]) -> str:
    """Replace placeholder tokens in a single left-to-right pass.

    Inserted values are not scanned again, so a value that happens to contain
    a token is left as is. When tokens overlap, the earlier pair wins.
    """
    if not replacements:
        return message
    values: dict[str, str] = {}
    for token, value in replacements:
        values.setdefault(token, value)
    pattern = re.compile("|".join(re.escape(token) for token in values))
    return pattern.sub(lambda m: values[m.group(0)], message)


def json_string_escape(value: str) -> str:
    """Escape a value for insertion between the quotes of a JSON string."""
    return json.dumps(value, ensure_ascii=False)[1:-1]


def format_started_at(started_at: int, tz: tzinfo = timezone.utc, label: str = "CET") -> str:
    """Render Unix seconds as `YYYY-MM-DD HH:MM:SS <label>` in ``tz``.

    Only timestamps within the range of ``datetime`` (years 1 to 9999) can be
    rendered; anything outside raises ParseError.
    """
    try:
        started = datetime.fromtimestamp(started_at, tz=tz)
    except (OverflowError, OSError, ValueError) as e:
        raise ParseError(f"started_at out of range: {started_at}") from e
    return f"{started.strftime(TIME_FORMAT)} {label}"


class GoogleChatChannel(BaseChannel):
    """Google Chat space webhook channel."""

    def __init__(
        self,
        webhook_url: str,
        tz: tzinfo = timezone.utc,
        timezone_label: str = "CET",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._webhook_url = webhook_url
        self._tz = tz
        self._timezone_label = timezone_label
        self._transport = transport

    @property
    def name(self) -> str:
        return "google_chat"

    @property
    def enabled(self) -> bool:
        return bool(self._webhook_url)

    def _replacements(self, incident: Incident) -> list[tuple[str, str]]:
        started_at = format_started_at(incident.started_at, self._tz, self._timezone_label)
        return [
            ("{alertName}", incident.policy_name),
            ("{startedAt}", started_at),
            ("{logMessage}", incident.documentation.content),
            ("{status}", incident.state),
            ("{incidentURL}", incident.url),
        ]

    def render(self, incident: Incident) -> str:
        replacements = [
            (token, json_string_escape(value))
            for token, value in self._replacements(incident)
        ]
        return format_message(MESSAGE_TEMPLATE, replacements)

    async def send(self, incident: Incident) -> None:
        message = self.render(incident)
        body = await self._post(message)

        try:
            result = GoogleChatResponse.model_validate_json(body)
        except ValidationError as e:
            text = body.decode("utf-8", errors="replace")
            logger.error(f"Unparseable Google Chat response: {text}")
            raise ResponseParseError(
                f"failed to unmarshal google chat response: {e}", text
            ) from e

        if result.failed:
            error = result.error
            logger.error(f"Google Chat API error: {error}")
            raise RemoteError(error.code, error.message, error.status)

        logger.info("Alert sent to Google Chat successfully")

    async def _post(self, message: str) -> bytes:
        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                request = client.build_request(
                    "POST",
                    self._webhook_url,
                    content=message.encode("utf-8"),
                    headers={"Content-Type": "application/json"},
                )
                response = await client.send(request, stream=True)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise TransportError(f"failed to send request to Google Chat: {e}") from e

            try:
                body = await response.aread()
            except (httpx.HTTPError, httpx.StreamError) as e:
                raise ReadError(f"failed to read body: {e}") from e
            finally:
                await response.aclose()

        logger.debug(f"Google Chat responded with HTTP {response.status_code}")
        return body

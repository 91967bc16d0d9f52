"""Google Chat webhook response models."""

from pydantic import StrictInt, StrictStr

from app.models.base import ZeroValueModel


class GoogleChatError(ZeroValueModel):
    code: StrictInt = 0
    message: StrictStr = ""
    status: StrictStr = ""

    @property
    def is_empty(self) -> bool:
        # Compared against the zero value, so an explicit all-zero error is success
        return self == GoogleChatError()


class GoogleChatResponse(ZeroValueModel):
    """Webhook response body. Only the error part is inspected."""

    error: GoogleChatError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None and not self.error.is_empty

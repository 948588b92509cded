import logging
from enum import Enum

from database.widget_instance_dao import WidgetInstanceDAO
from utils.constants import MIN_PIN_PLATFORM_VERSION

logger = logging.getLogger(__name__)


class PinResult(Enum):
    PINNED = "pinned"
    ALREADY_PINNED = "already_pinned"     # nothing to do
    DENIED = "denied"                     # host cannot pin; no-op
    UNSUPPORTED = "unsupported"           # platform too old


class PinService:
    def __init__(
        self,
        instance_dao: WidgetInstanceDAO,
        platform_version: int,
        pin_supported: bool = True,
    ):
        self._dao = instance_dao
        self._platform_version = platform_version
        self._pin_supported = pin_supported

    def has_pinned_widget(self) -> bool:
        return bool(self._dao.get_all_ids())

    def request_pin(self) -> PinResult:
        if self._platform_version < MIN_PIN_PLATFORM_VERSION:
            logger.info(
                f"Pinning needs platform version {MIN_PIN_PLATFORM_VERSION}+, "
                f"host is {self._platform_version}"
            )
            return PinResult.UNSUPPORTED
        if self.has_pinned_widget():
            return PinResult.ALREADY_PINNED
        if not self._pin_supported:
            return PinResult.DENIED
        widget_id = self._dao.create()
        logger.info(f"Pinned widget {widget_id}")
        return PinResult.PINNED

    def remove_widget(self, widget_id: int) -> bool:
        """Drop a widget from the home screen; False if it was not there."""
        if widget_id not in self._dao.get_all_ids():
            return False
        self._dao.delete(widget_id)
        logger.info(f"Removed widget {widget_id}")
        return True

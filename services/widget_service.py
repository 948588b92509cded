import logging

from database.snapshot_dao import SnapshotDAO
from database.widget_instance_dao import WidgetInstanceDAO
from models.snapshot import Snapshot
from models.view_command import CommandSet
from services.snapshot_parser import SnapshotParser
from services.widget_composer import WidgetComposer

logger = logging.getLogger(__name__)


class WidgetService:
    def __init__(
        self,
        snapshot_dao: SnapshotDAO,
        instance_dao: WidgetInstanceDAO,
        composer: WidgetComposer,
        parser: SnapshotParser | None = None,
    ):
        self._snapshot_dao = snapshot_dao
        self._instance_dao = instance_dao
        self._composer = composer
        self._parser = parser or SnapshotParser()

    def refresh(self, widget_ids) -> dict[int, CommandSet]:
        """Compose a fresh command set for each widget id, independently."""
        widget_ids = list(widget_ids)
        logger.debug(f"Refresh requested for {len(widget_ids)} widgets")
        return {wid: self.refresh_one(wid) for wid in widget_ids}

    def refresh_all(self) -> dict[int, CommandSet]:
        return self.refresh(self._instance_dao.get_all_ids())

    def refresh_one(self, widget_id: int) -> CommandSet:
        snapshot = None
        try:
            snapshot = self._parser.parse(self._snapshot_dao.read())
            commands = self._composer.compose(widget_id, snapshot)
        except Exception:
            logger.exception(f"Error updating widget {widget_id}; showing empty state")
            quick_actions = snapshot.quick_actions if snapshot is not None else ()
            return self._compose_empty(widget_id, quick_actions)
        logger.debug(f"Widget {widget_id} updated ({commands.state.value})")
        return commands

    def _compose_empty(self, widget_id: int, quick_actions) -> CommandSet:
        """NO_DATA command set; drops the quick actions if they break it too."""
        if quick_actions:
            try:
                return self._composer.compose(widget_id, Snapshot.empty(quick_actions=quick_actions))
            except Exception:
                logger.exception(f"Empty state for widget {widget_id} failed; using placeholders")
        return self._composer.compose(widget_id, Snapshot.empty())

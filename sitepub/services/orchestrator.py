"""Publish state machine.

One run goes through

    Building -> (QueueBranch | LiveBranch) -> LoggingResult -> ClearingNotes -> Done

Each step returns a Result. The first Err ends the active branch and the run
goes straight to LoggingResult, which skips marker removal and the browser
open. LoggingResult and ClearingNotes always run, so every invocation
appends exactly one audit row and consumes its release notes exactly once.

Target selection and confirmation happen before the orchestrator is called
(see sitepub.cli.selector).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ..core.config import PublishConfig
from ..core.model import LiveTarget, LogResult, PublishLogEntry, PublishTarget, QueueTarget
from ..core.result import Err, Ok, Result
from ..output.console import ConsoleProtocol, Style
from ..platform.files import clear_directory
from .audit import AuditLog
from .build import BuildVerifier
from .errors import FilesystemError, PublishError
from .maintenance import MaintenanceWindow
from .notes import ReleaseNotes, ReleaseNotesProvider
from .publish import PublishInvoker

type RunOutcome = Result[None, PublishError]


@dataclass(frozen=True, slots=True)
class RunReport:
    target: PublishTarget
    outcome: RunOutcome
    entry: PublishLogEntry
    url_opened: bool = False

    @property
    def succeeded(self) -> bool:
        return isinstance(self.outcome, Ok)


class PublishOrchestrator:
    def __init__(
        self,
        *,
        config: PublishConfig,
        console: ConsoleProtocol,
        open_url: Callable[[str], object],
        maintenance: MaintenanceWindow | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._console = console
        self._open_url = open_url
        self._clock = clock
        self._builder = BuildVerifier(
            command=config.build_command, project_root=config.project_root, console=console
        )
        self._publisher = PublishInvoker(
            command=config.publish_command, project_root=config.project_root, console=console
        )
        self._maintenance = maintenance or MaintenanceWindow(console=console)
        self._notes = ReleaseNotesProvider(path=config.release_notes_path, console=console)
        self._audit = AuditLog(path=config.audit_log_path)

    def run(self, target: PublishTarget) -> RunReport:
        """Execute one publish run against target. Never raises for run failures."""
        notes = self._notes.load()
        if notes:
            self._console.print(f"release notes: {len(notes.lines)} line(s)", Style.DIM)

        outcome, url_opened = self._execute(target)
        entry = self._entry_for(target, outcome, notes)

        # LoggingResult
        logged = self._audit.append(entry)
        if isinstance(logged, Err):
            self._console.warning(logged.error.message)

        # ClearingNotes
        if notes.pending:
            cleared = self._notes.clear()
            if isinstance(cleared, Err):
                self._console.warning(cleared.error.message)

        return RunReport(target=target, outcome=outcome, entry=entry, url_opened=url_opened)

    def _execute(self, target: PublishTarget) -> tuple[RunOutcome, bool]:
        built = self._builder.verify()
        if isinstance(built, Err):
            return built, False

        match target:
            case QueueTarget():
                return self._publish_queue(target), False
            case LiveTarget():
                return self._publish_live(target)

    def _publish_queue(self, target: QueueTarget) -> RunOutcome:
        self._console.header("Queue")
        try:
            removed = clear_directory(target.directory)
        except OSError as e:
            return Err(FilesystemError(action="clear", path=target.directory, reason=str(e)))
        self._console.print(f"removed {len(removed)} entries from {target.directory}", Style.DIM)

        return self._publisher.publish(target.directory)

    def _publish_live(self, target: LiveTarget) -> tuple[RunOutcome, bool]:
        window = self._maintenance

        offline = window.take_offline(target)
        if isinstance(offline, Err):
            return offline, False

        window.wait_for_host(target)

        cleared = window.clear(target)
        if isinstance(cleared, Err):
            return cleared, False

        published = self._publisher.publish(target.directory)
        if isinstance(published, Err):
            return published, False

        online = window.bring_online(target)
        if isinstance(online, Err):
            return online, False

        try:
            self._open_url(target.url)
        except Exception as e:  # noqa: BLE001
            # Marker is already gone here; the run stays successful.
            self._console.warning(f"could not open {target.url}: {e}")
            return Ok(None), False
        return Ok(None), True

    def _entry_for(
        self, target: PublishTarget, outcome: RunOutcome, notes: ReleaseNotes
    ) -> PublishLogEntry:
        match outcome:
            case Ok():
                result = LogResult.SUCCESS
                if isinstance(target, LiveTarget):
                    message = f"published live to {target.url}"
                else:
                    message = f"published to queue {target.directory}"
            case Err(error):
                result = LogResult.FAILED
                message = error.message

        return PublishLogEntry(
            timestamp=self._clock(),
            result=result,
            message=message,
            target_kind=target.kind,
            release_notes=notes.text,
        )

# pomotodo/app/main.py
from __future__ import annotations
import logging
import os
from typing import Dict, Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.settings_dialog import SettingsDialog
from .views.theme import apply_modern_theme
from .views.todo_list_view import TodoListView

# ---- ViewModels ----
from ..viewmodels.settings_vm import SettingsVM
from ..viewmodels.todo_list_vm import TodoListVM, TodoRow

# ---- Adapters & scheduling ----
from ..adapters.storage_local import StorageLocal
from ..domain.entities import TodoItem
from .tick_scheduler import TickScheduler
from ..utils import logging as logging_utils


class App:
    """Bootstrap: wire Views <-> ViewModels, settings storage, and the tick scheduler."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self.win = MainWindowView(
            on_add_task=self._on_add_task,
            on_open_settings=self._on_open_settings,
            on_close=self._on_close,
        )
        apply_modern_theme(self.win)

        # ---- LocalStorage Adapter & settings ----
        self.settings_vm = SettingsVM(on_save=self._on_settings_saved)
        self._storage_root = os.environ.get("POMOTODO_STORAGE_ROOT") or "."
        self._storage = StorageLocal(root_dir=self._storage_root)
        self._load_user_settings()

        # ---- Scheduler & ViewModels ----
        self.scheduler = TickScheduler(self.win.after, self.win.after_cancel)
        self.todo_vm = TodoListVM(
            self.scheduler,
            duration_s=self.settings_vm.duration_s,
            on_rows_changed=self._schedule_refresh,
            on_row_updated=self._on_row_updated,
            on_timer_completed=self._on_timer_completed,
        )

        # ---- Subviews ----
        row_callbacks = dict(
            on_toggle_done=self.todo_vm.toggle_done,
            on_start_pause=self.todo_vm.start_pause,
            on_reset=self.todo_vm.reset,
            on_delete=self.todo_vm.delete,
        )
        self.active_list = TodoListView(
            self.win.tab_todos,
            clock_size=self.settings_vm.clock_size_px,
            empty_text="No open tasks. Add one above.",
            **row_callbacks,
        )
        self.win.mount_active_list(self.active_list)
        self.completed_list = TodoListView(
            self.win.tab_completed,
            clock_size=self.settings_vm.clock_size_px,
            empty_text="Nothing completed yet.",
            **row_callbacks,
        )
        self.win.mount_completed_list(self.completed_list)

        self._settings_dialog: Optional[SettingsDialog] = None
        self._refresh_after_id: Optional[str] = None
        self._refresh_lists()
        self.win.show_toast("Ready.")
        self.win.entry.focus_set()

    def _load_user_settings(self) -> None:
        payload: Optional[Dict] = None
        try:
            payload = self._storage.load_user_settings()
        except (OSError, ValueError) as exc:
            self._log.warning("Could not load settings: %s", exc)
            self.win.show_toast(f"Could not load settings: {exc}")
        if payload is not None:
            try:
                self.settings_vm.apply_dict(payload)
            except ValueError as exc:
                self._log.warning("Ignoring stored settings: %s", exc)
                self.win.show_toast(str(exc))
        self._apply_logging_preferences()

    def _apply_logging_preferences(self) -> None:
        level = logging_utils.setup_logging(self.settings_vm.debug_logging)
        self._log.debug("Log level: %s", logging.getLevelName(level))

    # ==================================================================
    # Actions
    # ==================================================================
    def _on_add_task(self, text: str) -> None:
        row = self.todo_vm.add_task(text)
        if row is None:
            return
        self.win.tabs.select(self.win.tab_todos)
        self.win.show_toast(f"Added “{row.label}”.")

    def _on_open_settings(self) -> None:
        if self._settings_dialog is not None and self._settings_dialog.winfo_exists():
            self._settings_dialog.lift()
            return
        dialog = SettingsDialog(self.win, on_save=self._on_dialog_save, on_close=self._on_dialog_closed)
        dialog.set_pomodoro_minutes(self.settings_vm.pomodoro_minutes)
        dialog.set_clock_size(self.settings_vm.clock_size_px)
        dialog.set_debug_logging(self.settings_vm.debug_logging)
        self._settings_dialog = dialog

    def _on_dialog_save(self, payload: dict) -> None:
        try:
            self.settings_vm.apply_dict(payload)
        except ValueError as exc:
            self.win.show_toast(str(exc), level="warning")
            return
        self.settings_vm.cmd_save()

    def _on_dialog_closed(self) -> None:
        self._settings_dialog = None

    def _on_settings_saved(self, cfg: dict) -> None:
        try:
            self._storage.save_user_settings(cfg)
        except OSError as exc:
            self._log.error("Failed to save settings: %s", exc)
            self.win.show_toast(f"Failed to save settings: {exc}", level="warning")
            return
        self.todo_vm.duration_s = self.settings_vm.duration_s
        self.active_list.clock_size = self.settings_vm.clock_size_px
        self.completed_list.clock_size = self.settings_vm.clock_size_px
        self._apply_logging_preferences()
        self.win.show_toast("Settings saved.")

    def _on_close(self) -> None:
        self.todo_vm.dispose_all()
        self.scheduler.cancel_all()

    # ==================================================================
    # ViewModel -> View
    # ==================================================================
    def _schedule_refresh(self) -> None:
        # Row buttons trigger structural changes; rebuild once the click handler returns.
        if self._refresh_after_id is None:
            self._refresh_after_id = self.win.after_idle(self._refresh_lists)

    def _refresh_lists(self) -> None:
        self._refresh_after_id = None
        active = self.todo_vm.rows(done=False)
        completed = self.todo_vm.rows(done=True)
        self.active_list.set_rows(active)
        self.completed_list.set_rows(completed)
        self.win.set_counts(len(active), len(completed))

    def _on_row_updated(self, row: TodoRow) -> None:
        target = self.completed_list if row.done else self.active_list
        target.update_row(row)

    def _on_timer_completed(self, item: TodoItem) -> None:
        self.win.show_toast(f"Pomodoro for “{item.label}” completed!", level="warning")


def main() -> None:
    logging_utils.setup_logging()
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()

"""Record List Controller — view-model between the employee list, the edit form and the store.

Invariants:
    - records is only ever replaced wholesale from store.list_all(); never patched
    - Every successful mutation (confirm, remove) is followed by a full reload
    - At most one mutating operation (confirm, remove, reload) runs at a time;
      later calls queue on an asyncio.Lock and the lock is released on every exit path
    - Validation failures never reach the store and leave mode and drafts untouched
    - Store failures propagate to the caller with records and form left as they were
    - A record that vanished from the store is a silent no-op (begin_edit, confirm, remove)
    - Multi-field form updates are published in one notifier batch
    - begin_add / begin_edit are ignored while a mutation holds the lock, so a
      pending confirm never closes a form opened after it started

Design Decisions:
    - Store injected at construction (EmployeeStore Protocol), one controller per process
    - Form transitions computed as FormState snapshots (core/form_state.py) and published
      here; the controller owns IO and notification, core owns the rules
    - confirm() reads the drafts after acquiring the lock: a confirm queued behind one
      that already closed the form sees the cleared drafts and fails validation
    - confirm() validates in every mode; valid drafts confirmed while HIDDEN write
      nothing and only reload and close
"""

import asyncio
import logging
from typing import Sequence

from organization.core.domain_types import EmployeeId, FormMode
from organization.core.employee import Employee, EmployeeDraft
from organization.core.errors import FormValidationError, RosterError
from organization.core.form_state import (
    FormState, adding, editing, hidden, with_error,
)
from organization.core.observable import ChangeNotifier, ObservableField
from organization.core.repository_protocols import EmployeeStore
from organization.core.validate_draft import validate_draft
from organization.infrastructure.observability import error_extra

logger = logging.getLogger(__name__)


class RecordListController:
    """Owns the cached employee list and the add/edit form state machine."""

    def __init__(self, store: EmployeeStore):
        self._store = store
        self._mutation_lock = asyncio.Lock()
        self.notifier = ChangeNotifier()

        self._records: ObservableField[tuple[Employee, ...]] = ObservableField(
            "records", (), self.notifier,
        )
        self._mode = ObservableField("mode", FormMode.HIDDEN, self.notifier)
        self._editing_id: ObservableField[EmployeeId | None] = ObservableField(
            "editing_id", None, self.notifier,
        )
        self._form_visible = ObservableField("form_visible", False, self.notifier)
        self._error_message = ObservableField("error_message", "", self.notifier)

        # Bound to input widgets; the presentation writes these directly
        self.draft_name = ObservableField("draft_name", "", self.notifier)
        self.draft_position = ObservableField("draft_position", "", self.notifier)
        self.draft_salary_text = ObservableField(
            "draft_salary_text", "", self.notifier,
        )

        # Read-only to the presentation
        self.records = self._records.view()
        self.mode = self._mode.view()
        self.editing_id = self._editing_id.view()
        self.form_visible = self._form_visible.view()
        self.error_message = self._error_message.view()

    # ─── State snapshots ────────────────────────────────────────

    @property
    def form_state(self) -> FormState:
        return FormState(
            mode=self._mode.value,
            editing_id=self._editing_id.value,
            draft_name=self.draft_name.value,
            draft_position=self.draft_position.value,
            draft_salary_text=self.draft_salary_text.value,
            error_message=self._error_message.value,
        )

    @property
    def busy(self) -> bool:
        """True while a mutating operation holds the lock."""
        return self._mutation_lock.locked()

    def _publish(self, state: FormState) -> None:
        with self.notifier.batch():
            self._mode.value = state.mode
            self._editing_id.value = state.editing_id
            self.draft_name.value = state.draft_name
            self.draft_position.value = state.draft_position
            self.draft_salary_text.value = state.draft_salary_text
            self._error_message.value = state.error_message
            self._form_visible.value = state.visible

    def _find(self, employee_id: EmployeeId) -> Employee | None:
        for employee in self._records.value:
            if employee.id == employee_id:
                return employee
        return None

    # ─── Form actions (synchronous, no store access) ────────────

    def _ignored_while_busy(self, action: str) -> bool:
        if not self.busy:
            return False
        logger.debug(f"{action} ignored: mutation in flight", extra={"action": action})
        return True

    def begin_add(self) -> None:
        """Open an empty form for a new employee."""
        if self._ignored_while_busy("begin_add"):
            return
        self._publish(adding())
        logger.debug("Form opened for new employee", extra={"action": "begin_add"})

    def begin_edit(self, employee_id: EmployeeId) -> None:
        """Open the form on an employee from the current list. Unknown ids are ignored."""
        if self._ignored_while_busy("begin_edit"):
            return
        employee = self._find(employee_id)
        if employee is None:
            logger.debug(
                "begin_edit ignored: employee not in list",
                extra={"action": "begin_edit", "employee_id": employee_id},
            )
            return
        self._publish(editing(employee))
        logger.debug(
            "Form opened for edit",
            extra={"action": "begin_edit", "employee_id": employee_id},
        )

    def cancel(self) -> None:
        """Close the form and discard drafts."""
        self._publish(hidden())

    # ─── Mutating actions (async, serialized) ───────────────────

    async def confirm(self) -> bool:
        """Validate drafts, persist, reload and close the form.

        Returns True when the form was closed. False means validation failed:
        error_message is set and nothing was written.
        """
        async with self._mutation_lock:
            state = self.form_state
            try:
                draft = validate_draft(
                    state.draft_name, state.draft_position, state.draft_salary_text,
                )
            except FormValidationError as e:
                self._publish(with_error(state, e.message))
                logger.info(
                    f"Draft rejected: {e.message}",
                    extra=error_extra(e, action="confirm", mode=state.mode.value),
                )
                return False
            self._error_message.value = ""

            try:
                if state.mode == FormMode.EDITING:
                    await self._write_update(state.editing_id, draft)
                elif state.mode == FormMode.ADDING:
                    employee = await self._store.insert(draft)
                    logger.info(
                        "Employee added",
                        extra={"action": "confirm", "employee_id": employee.id},
                    )
                await self._reload_locked()
            except RosterError as e:
                logger.error(
                    f"confirm failed: {e.message}",
                    extra=error_extra(
                        e, action="confirm", mode=state.mode.value,
                        employee_id=state.editing_id,
                    ),
                )
                raise

            self._publish(hidden())
            return True

    async def _write_update(self, employee_id: EmployeeId, draft: EmployeeDraft) -> None:
        current = await self._store.get_by_id(employee_id)
        if current is None:
            # TODO: surface "record no longer exists" once the UI has a slot for it
            logger.info(
                "Edited employee no longer exists; update skipped",
                extra={"action": "confirm", "employee_id": employee_id},
            )
            return
        updated = await self._store.update(current.with_draft(draft))
        logger.info(
            "Employee updated" if updated else "Employee vanished during update",
            extra={"action": "confirm", "employee_id": employee_id},
        )

    async def remove(self, employee_id: EmployeeId) -> bool:
        """Delete an employee and reload. Returns False when it was already gone.

        An open edit of the same employee is left as it is.
        """
        async with self._mutation_lock:
            try:
                deleted = await self._store.delete_by_id(employee_id)
                await self._reload_locked()
            except RosterError as e:
                logger.error(
                    f"remove failed: {e.message}",
                    extra=error_extra(e, action="remove", employee_id=employee_id),
                )
                raise
        logger.info(
            "Employee removed" if deleted else "Employee already absent",
            extra={"action": "remove", "employee_id": employee_id},
        )
        return deleted

    async def reload(self) -> Sequence[Employee]:
        """Replace records with the store's current contents.

        On failure records keep their previous value and the error propagates.
        """
        async with self._mutation_lock:
            try:
                return await self._reload_locked()
            except RosterError as e:
                logger.error(
                    f"reload failed: {e.message}",
                    extra=error_extra(e, action="reload"),
                )
                raise

    async def load(self) -> Sequence[Employee]:
        """Initial population of records at startup."""
        records = await self.reload()
        logger.info(f"Loaded {len(records)} employees", extra={"action": "load"})
        return records

    async def _reload_locked(self) -> tuple[Employee, ...]:
        employees = tuple(await self._store.list_all())
        self._records.value = employees
        return employees

"""Audit service — append-only audit trail for all store mutations."""

import itertools
from typing import Any, Dict, List, Optional

from skills_enhance.models.audit_log import AuditLog
from skills_enhance.models.user import User


class AuditService:
    """Records immutable audit log entries for system events."""

    def __init__(self):
        self._entries: List[AuditLog] = []
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._entries)

    def log(
        self,
        actor: Optional[User],
        action: str,
        resource_type: str,
        resource_id: Optional[str] = None,
        old_value: Optional[Any] = None,
        new_value: Optional[Any] = None,
    ) -> AuditLog:
        """Append a single audit log record.

        Args:
            actor: the current actor when the mutation happened, if any.
            action: e.g. "user.login", "role.created", "navbar.updated"
            resource_type: role, user, navbar
        """
        entry = AuditLog(
            id=next(self._ids),
            actor_id=actor.id if actor else None,
            actor_email=actor.email if actor else None,
            action=action,
            resource_type=resource_type,
            resource_id=str(resource_id) if resource_id is not None else None,
            old_value=old_value,
            new_value=new_value,
        )
        self._entries.append(entry)
        return entry

    def query_logs(
        self,
        actor_id: Optional[str] = None,
        action: Optional[str] = None,
        resource_type: Optional[str] = None,
        page: int = 1,
        page_size: int = 50,
    ) -> Dict[str, Any]:
        """Query audit logs with filters and pagination, newest first."""
        logs = self._entries
        if actor_id:
            logs = [e for e in logs if e.actor_id == actor_id]
        if action:
            needle = action.lower()
            logs = [e for e in logs if needle in e.action.lower()]
        if resource_type:
            logs = [e for e in logs if e.resource_type == resource_type]

        ordered = sorted(logs, key=lambda e: e.id, reverse=True)
        start = (page - 1) * page_size
        return {
            "logs": ordered[start:start + page_size],
            "total": len(ordered),
            "page": page,
            "page_size": page_size,
        }

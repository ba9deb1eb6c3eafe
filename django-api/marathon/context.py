"""Request-scoped access contexts.

A SessionContext wraps the Actor resolved from the request's credentials
and routes every data access through the access policy evaluator.

An ElevatedContext skips the evaluator. It can only be obtained by calling
SessionContext.elevate() with a reason, so every privileged access shows up
at its call site and in the logs.
"""

import logging

from marathon.domain import ALLOW, Actor, Decision, Operation, RecordType, RoleGrant, UserId, evaluate

logger = logging.getLogger(__name__)

_ELEVATION_KEY = object()


class SessionContext:
    """Actor snapshot for one request. Never re-fetched mid-request."""

    elevated = False

    def __init__(self, actor: Actor | None) -> None:
        self._actor = actor

    @classmethod
    def anonymous(cls) -> "SessionContext":
        return cls(actor=None)

    @classmethod
    def for_user(cls, user) -> "SessionContext":
        """Resolve a Django user into a context.

        Anonymous, inactive or missing users resolve to an absent actor.
        """
        if user is None or not user.is_authenticated or not user.is_active:
            return cls.anonymous()
        grants = [
            RoleGrant(
                admin=role.admin,
                can_manage_users=role.can_manage_users,
                can_manage_content=role.can_manage_content,
                runner=role.runner,
                volunteer=role.volunteer,
                event=role.event.shortname if role.event_id else None,
            )
            for role in user.roles.select_related("event")
        ]
        return cls(Actor.from_grants(UserId(user.pk), user.username, grants))

    @property
    def actor(self) -> Actor | None:
        return self._actor

    def decide(self, record_type: RecordType, operation: Operation) -> Decision:
        return evaluate(self._actor, record_type, operation)

    def elevate(self, reason: str) -> "ElevatedContext":
        username = self._actor.username if self._actor else None
        logger.info(
            "Elevated access granted: %s",
            reason,
            extra={"elevation_reason": reason, "actor": username},
        )
        return ElevatedContext(reason, self._actor, _key=_ELEVATION_KEY)


class ElevatedContext:
    """Bypass handle for trusted server-side operations."""

    elevated = True

    def __init__(self, reason: str, actor: Actor | None, *, _key: object = None) -> None:
        if _key is not _ELEVATION_KEY:
            raise TypeError("ElevatedContext is only issued by SessionContext.elevate()")
        self.reason = reason
        self._actor = actor

    @property
    def actor(self) -> Actor | None:
        return self._actor

    def decide(self, record_type: RecordType, operation: Operation) -> Decision:
        return ALLOW

    def __repr__(self) -> str:
        return f"<ElevatedContext reason={self.reason!r}>"


AccessContext = SessionContext | ElevatedContext

"""Django signals for cache invalidation and issued-resource guards."""

from django.db.models.signals import post_delete, post_save, pre_save
from django.dispatch import receiver

from marathon.cache import invalidate_event
from marathon.domain.errors import InvalidPaymentTransitionError
from marathon.models import Event, ShirtOrder, Ticket


@receiver(pre_save, sender=Event)
def remember_previous_shortname(sender, instance, **kwargs):
    """Keep the stored shortname so a rename also clears the old detail key."""
    if instance._state.adding:
        instance._previous_shortname = None
        return
    instance._previous_shortname = (
        sender.objects.filter(pk=instance.pk).values_list("shortname", flat=True).first()
    )


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate catalog caches when an event is saved or deleted."""
    invalidate_event(instance.shortname, getattr(instance, "_previous_shortname", None))


@receiver(pre_save, sender=Ticket)
@receiver(pre_save, sender=ShirtOrder)
def guard_issued_resource(sender, instance, **kwargs):
    """Reject saves that unpay a resource or hand it to another user."""
    if instance._state.adding:
        return
    previous = sender.objects.filter(pk=instance.pk).values("paid", "user_id").first()
    if previous is None:
        return
    if previous["paid"] and not instance.paid:
        raise InvalidPaymentTransitionError("A paid resource cannot be marked unpaid")
    if previous["user_id"] != instance.user_id:
        raise InvalidPaymentTransitionError("The owner of an issued resource cannot change")

"""
Keep every view host paired with its own view collection
"""
import logging

from django.db.models.signals import post_save, post_delete

from .models import ViewCollection, get_view_host_models

logger = logging.getLogger(__name__)


def create_view_collection(sender, instance, created, raw=False, **kwargs):
    """Give a newly saved host its collection"""
    if raw or instance.view_collection_id:
        return

    collection = ViewCollection.objects.create()
    sender.objects.filter(pk=instance.pk).update(view_collection=collection)
    instance.view_collection = collection
    logger.info(f"Created view collection #{collection.pk} for {sender._meta.label} #{instance.pk}")


def delete_view_collection(sender, instance, **kwargs):
    """Remove the collection, and with it the views, of a deleted host"""
    if not instance.view_collection_id:
        return

    deleted, _ = ViewCollection.objects.filter(pk=instance.view_collection_id).delete()
    if deleted:
        logger.info(f"Deleted view collection #{instance.view_collection_id} of {sender._meta.label} #{instance.pk}")


def register_signals():
    for model in get_view_host_models():
        post_save.connect(
            create_view_collection, sender=model,
            dispatch_uid=f'pageviews_create_collection_{model._meta.label_lower}'
        )
        post_delete.connect(
            delete_view_collection, sender=model,
            dispatch_uid=f'pageviews_delete_collection_{model._meta.label_lower}'
        )

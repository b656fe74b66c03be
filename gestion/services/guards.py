"""
Delete guard.

A record referenced by another record through a required (``PROTECT``)
foreign key cannot be removed.  Instead of letting the database refuse
the delete, the guard counts those dependents first and reports them.
"""
import logging
from typing import Dict

from django.db import models
from django.db.models.deletion import ProtectedError

from ..exceptions import DependentRecordsExist, EntityNotFound

logger = logging.getLogger(__name__)


def get_for_write(model, pk):
    """Fetch the target of an update or delete; a missing id is a 400."""
    obj = model._default_manager.filter(pk=pk).first()
    if obj is None:
        raise EntityNotFound(f'{model._meta.verbose_name} {pk} not found')
    return obj


def blocking_dependents(instance: models.Model) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for rel in instance._meta.related_objects:
        if rel.on_delete is not models.PROTECT:
            continue
        n = rel.related_model._default_manager.filter(**{rel.field.name: instance}).count()
        if n:
            counts[rel.get_accessor_name()] = n
    return counts


def _refuse(instance, counts):
    label = instance._meta.verbose_name
    logger.warning('refused delete of %s %s: dependents %s', label, instance.pk, counts)
    return DependentRecordsExist(
        f"cannot delete {label}: has dependent {', '.join(counts)}", dependents=counts
    )


def guarded_delete(instance: models.Model) -> None:
    counts = blocking_dependents(instance)
    if counts:
        raise _refuse(instance, counts)
    pk = instance.pk
    try:
        instance.delete()
    except ProtectedError as exc:
        # 计数之后有新的依赖记录写入
        raise _refuse(instance, blocking_dependents(instance) or {'records': len(exc.protected_objects)}) from exc
    logger.info('deleted %s %s', instance._meta.verbose_name, pk)

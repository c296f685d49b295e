"""Partition existing link entries into OPeNDAP slots."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ..config.LinkConfig import LinkConfig
from .is_cloud_url import is_cloud_url

T = TypeVar("T")


@dataclass
class OpendapSlots(Generic[T]):
    """Existing entries keyed by slot; everything else stays in ``others``."""

    on_prem: T | None = None
    cloud: T | None = None
    others: list[T] = field(default_factory=list)


def partition_opendap_slots(
    entries: Iterable[T],
    is_opendap: Callable[[T], bool],
    url_of: Callable[[T], str],
    config: LinkConfig | None = None,
) -> OpendapSlots[T]:
    """Assign each entry to the on-prem slot, the cloud slot, or ``others``.

    The first OPeNDAP entry of each kind takes the slot. Later entries of an
    already occupied slot pass through to ``others`` in document order.
    """
    config = config or LinkConfig()
    slots: OpendapSlots[T] = OpendapSlots()
    for entry in entries:
        if not is_opendap(entry):
            slots.others.append(entry)
        elif is_cloud_url(url_of(entry), config):
            if slots.cloud is None:
                slots.cloud = entry
            else:
                slots.others.append(entry)
        elif slots.on_prem is None:
            slots.on_prem = entry
        else:
            slots.others.append(entry)
    return slots

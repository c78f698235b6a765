"""
Shared building blocks for the domain apps.

Nothing in this package knows about payments or memberships:

    core.models / core.model_mixins   BaseModel, UUIDPrimaryKeyMixin
    core.managers                     BaseQuerySet time filters
    core.stores                       ModelStore (find_many / update_many)
    core.clock / core.protocols       SystemClock and the Clock protocol
    core.time_windows                 window_for_offset, TimeWindow
    core.locks                        DistributedLock
    core.exceptions                   BaseApplicationError hierarchy
"""

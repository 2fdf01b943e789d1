"""Infrastructure Layer: storage gateways, storage lifecycle, logging.

Invariants:
    - Driver exceptions never escape this layer unmapped (StorageError)
    - Documents leave this layer with `_id` rendered as a string
"""

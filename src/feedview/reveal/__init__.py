from feedview.reveal.controller import DEFAULT_BATCH_SIZE, RevealController
from feedview.reveal.proximity import ManualProximityTrigger, ProximityTrigger

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "ManualProximityTrigger",
    "ProximityTrigger",
    "RevealController",
]

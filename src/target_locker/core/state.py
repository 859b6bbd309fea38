# src/target_locker/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..notify.gateway import NotificationGateway
from ..targets.target_models import Target
from .ports import TargetRepo


@dataclass
class AppState:
    """
    Everything mutable lives here and is passed explicitly to operations.

    - targets: in-memory copy of the list; written through to store on every mutation
    - gateway: owns banner + notification permission state
    """

    settings: Any
    store: TargetRepo
    gateway: NotificationGateway

    targets: list[Target] = field(default_factory=list)

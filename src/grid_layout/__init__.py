"""grid-layout: collision-resolving layout engine for draggable grid UIs."""

__version__ = "0.1.0"

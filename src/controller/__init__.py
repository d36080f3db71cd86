"""Controller layer: the sync engine between UI controls and the remote channel.

This package contains:
- catalog: CatalogAggregator for the paginated game catalog
- form: FormStateMachine for save/refresh with a busy guard
- sync: ChannelSyncManager for UI ↔ ChannelState sync
- panel: ChannelPanelController, the composition root
"""

from controller.field_mappings import FIELD_MAPPINGS, FieldMapping
from controller.catalog import CatalogAggregator
from controller.form import SAVE_SUCCESS_MESSAGE, FormState, FormStateMachine
from controller.options import build_options
from controller.sync import ChannelSyncManager
from controller.panel import ChannelPanelController

__all__ = [
    # Mapping
    "FIELD_MAPPINGS",
    "FieldMapping",
    "build_options",
    # Sync engine
    "CatalogAggregator",
    "FormState",
    "FormStateMachine",
    "SAVE_SUCCESS_MESSAGE",
    "ChannelSyncManager",
    "ChannelPanelController",
]

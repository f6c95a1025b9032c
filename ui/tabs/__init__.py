from .location_tab import LocationTab
from .options_tab import FabricTab, OptionsTab
from .drive_accessories_tab import DriveAccessoriesTab
from .dual_chain_tab import DualChainTab

__all__ = ['LocationTab', 'FabricTab', 'OptionsTab', 'DriveAccessoriesTab', 'DualChainTab']

"""
Utility modules for the storefront
"""
from .config_loader import StorefrontConfig, load_storefront_config
from .id_generator import IdGenerator

__all__ = [
    'StorefrontConfig',
    'load_storefront_config',
    'IdGenerator',
]

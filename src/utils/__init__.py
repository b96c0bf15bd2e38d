"""
Utility modules for the review proxy
"""
from .config_loader import Settings, load_settings
from .pagination import paginate
from .resource_config_loader import ResourceConfig, ResourceDefinition, load_resource_config

__all__ = [
    'Settings',
    'load_settings',
    'paginate',
    'ResourceConfig',
    'ResourceDefinition',
    'load_resource_config',
]

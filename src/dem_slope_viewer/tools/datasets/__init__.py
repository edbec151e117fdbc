from .api import register_dataset_tools

__all__ = ["register_dataset_tools"]

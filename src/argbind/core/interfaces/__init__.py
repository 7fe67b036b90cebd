from .model_bases import DomainModel
from .storage_cell_interface import IStorageCell
from .token_converter_interface import ITokenConverter

__all__ = ["DomainModel", "IStorageCell", "ITokenConverter"]

from unmark.cleaning.base import BaseCleaner
from unmark.cleaning.cleaner import Cleaner
from unmark.cleaning.factory import CleanerFactory
from unmark.cleaning.models import BoundaryPolicy

__all__ = ["BaseCleaner", "BoundaryPolicy", "Cleaner", "CleanerFactory"]

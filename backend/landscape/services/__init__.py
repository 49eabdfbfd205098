"""
Business logic services.

Services hold the engine: the API routers only translate HTTP to calls here.
"""
from landscape.services import entry_store
from landscape.services import relation_service
from landscape.services import filter_service
from landscape.services import color_service
from landscape.services import explorer_service

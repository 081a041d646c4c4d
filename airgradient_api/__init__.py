from . import models
from . import database
from . import schemas
from . import crud
from . import validation
from .routes import router

__all__ = ['models', 'database', 'schemas', 'crud', 'validation', 'router']

"""
Modules package initialization.
This package contains all the functional modules of the application.
"""

from fitsocial.modules import feed
from fitsocial.modules import follows
from fitsocial.modules import posts
from fitsocial.modules import profiles
from fitsocial.modules import workouts

from .models import *
from .services import *

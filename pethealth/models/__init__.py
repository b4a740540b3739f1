from .base import Base

from .pet import Pet, Species
from .weight_entry import WeightEntry, WeightUnit
from .event import Event, EventCategory
from .pet_event import PetEvent
from .vaccination import Vaccination
from .medication import Medication

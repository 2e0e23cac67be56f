# Dealership database models
# Import all models here for SQLAlchemy discovery

from dealership.models.vehicle import Vehicle, VehicleStatus                # noqa
from dealership.models.vehicle_subtype import Car, Sedan, Suv, Truck       # noqa
from dealership.models.part import Part, VehiclePart                        # noqa
from dealership.models.customer import Customer                             # noqa
from dealership.models.sale import Sale, PaymentMethod                      # noqa
from dealership.models.id_counter import IdCounter                          # noqa

from . import driver_schemas, response_schemas

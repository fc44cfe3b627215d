from .entity import Entity as Entity
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    NullArgumentException as NullArgumentException,
)
from .exception import (
    OperationCancelledException as OperationCancelledException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    StoreException as StoreException,
)
from .exception import (
    ValidationException as ValidationException,
)
from .repository import Repository as Repository
from .value_object import (
    PagedResult as PagedResult,
)

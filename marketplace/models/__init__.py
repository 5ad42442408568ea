from marketplace.models.base import Base  # noqa: F401

from marketplace.models.franchise import Franchise  # noqa: F401
from marketplace.models.business import Business  # noqa: F401
from marketplace.models.advertisement import Advertisement  # noqa: F401
from marketplace.models.inquiry import Inquiry  # noqa: F401
from marketplace.models.audit_log import AuditLog  # noqa: F401

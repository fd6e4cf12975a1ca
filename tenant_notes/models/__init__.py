from tenant_notes.models.tenant import Tenant, TenantPlan
from tenant_notes.models.user import User, UserRole
from tenant_notes.models.subscription import Subscription, SubscriptionStatus
from tenant_notes.models.note import Note

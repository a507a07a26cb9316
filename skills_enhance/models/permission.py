"""Permission set model — the fixed record of boolean capabilities."""

from pydantic import BaseModel, Field

from skills_enhance.core.exceptions import ValidationError


class PermissionSet(BaseModel):
    """Ten named capabilities. Keys are fixed, values are mutable per role.

    Serialized with the camelCase names (``manageUsers``); either form is
    accepted on input.
    """

    create: bool = False
    read: bool = False
    update: bool = False
    delete: bool = False
    publish: bool = False
    approve: bool = False
    manage_users: bool = Field(False, alias="manageUsers")
    manage_roles: bool = Field(False, alias="manageRoles")
    view_analytics: bool = Field(False, alias="viewAnalytics")
    support_chat: bool = Field(False, alias="supportChat")

    class Config:
        populate_by_name = True
        extra = "forbid"

    def allows(self, key: str) -> bool:
        """Return the value of a capability given either of its names."""
        return getattr(self, resolve_permission_key(key)) is True

    def to_public(self) -> dict:
        return self.model_dump(by_alias=True)


# camelCase name -> attribute name
PERMISSION_KEYS = {
    (field.alias or name): name for name, field in PermissionSet.model_fields.items()
}


def resolve_permission_key(key: str) -> str:
    """Map ``manageUsers`` or ``manage_users`` to the attribute name."""
    if key in PERMISSION_KEYS:
        return PERMISSION_KEYS[key]
    if key in PERMISSION_KEYS.values():
        return key
    raise ValidationError(f"Unknown permission '{key}'")


def default_permissions() -> PermissionSet:
    """Conservative fallback for role ids the registry does not know."""
    return PermissionSet(read=True, support_chat=True)

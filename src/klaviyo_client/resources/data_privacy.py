"""Data privacy (v2): GDPR/CCPA deletion requests."""

from typing import Any, Awaitable

from ..core.exceptions import ConfigurationError
from ..core.request import HTTPMethod
from .base import PrivateResource, require

DATA_PRIVACY = "data-privacy"
DELETION_REQUEST = "deletion-request"

ALLOWED_ID_TYPES = ("email", "phone_number", "person_id")


class DataPrivacy(PrivateResource):

    def request_profile_deletion(self, identifier: str, id_type: str = "email") -> Awaitable[Any]:
        """
        Request deletion of the profile matching ``identifier``.

        If several profiles match, Klaviyo deletes only one of them.

        Args:
            identifier: Email, phone number or Klaviyo person id
            id_type: One of "email", "phone_number", "person_id"

        Raises:
            ConfigurationError: Unknown id_type or empty identifier
        """
        if id_type not in ALLOWED_ID_TYPES:
            raise ConfigurationError(
                "Id_type invalid, please use either email, phone_number or person_id"
            )
        require(identifier, "Identifier was not provided.")
        return self._api.v2_call(
            f"{DATA_PRIVACY}/{DELETION_REQUEST}",
            HTTPMethod.POST,
            {id_type: identifier},
        )

"""Tenant repository over the deployed schools data store.

Maps the deployed column names of the ``schools`` and ``app_settings``
tables onto tenant entities. Reads only.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional

from ....core.value_objects import TenantId
from ....core.exceptions import DatabaseError
from ....database import DatabaseManager
from ..entities.tenant import Tenant, TenantSiteSettings


logger = logging.getLogger(__name__)


class TenantDatabaseRepository:
    """Database repository for tenant lookups."""

    TENANT_COLUMNS = """
        id, name, domain, email, from_email,
        resend_api_key, arkesel_api_key, arkesel_sender_id
    """

    SITE_SETTINGS_COLUMNS = """
        school_id, school_name, school_slogan, homepage_hero_slides,
        current_academic_year, school_address, school_email, school_phone
    """

    def __init__(self, database: DatabaseManager, schema: str = "public"):
        """Initialize with a database manager.

        Args:
            database: Database manager owning the pool
            schema: Database schema name (default: public)
        """
        self._db = database
        self._schools_table = f"{schema}.schools"
        self._settings_table = f"{schema}.app_settings"

    async def find_by_id(self, tenant_id: TenantId) -> Optional[Tenant]:
        """Find tenant by ID."""
        try:
            query = f"SELECT {self.TENANT_COLUMNS} FROM {self._schools_table} WHERE id = $1"
            row = await self._db.fetchrow(query, tenant_id.value)
        except Exception as e:
            logger.error(f"Failed to find tenant {tenant_id}: {e}")
            raise DatabaseError(f"Failed to find tenant: {e}")

        return self._map_row_to_tenant(row) if row else None

    async def find_by_domain(self, domain: str) -> Optional[Tenant]:
        """Find tenant by custom domain."""
        try:
            query = f"SELECT {self.TENANT_COLUMNS} FROM {self._schools_table} WHERE domain = $1"
            row = await self._db.fetchrow(query, domain)
        except Exception as e:
            logger.error(f"Failed to find tenant by domain {domain}: {e}")
            raise DatabaseError(f"Failed to find tenant by domain: {e}")

        return self._map_row_to_tenant(row) if row else None

    async def find_site_settings(self, tenant_id: TenantId) -> Optional[TenantSiteSettings]:
        """Find app_settings row for a tenant."""
        try:
            query = f"SELECT {self.SITE_SETTINGS_COLUMNS} FROM {self._settings_table} WHERE school_id = $1"
            row = await self._db.fetchrow(query, tenant_id.value)
        except Exception as e:
            logger.error(f"Failed to find site settings for tenant {tenant_id}: {e}")
            raise DatabaseError(f"Failed to find site settings: {e}")

        return self._map_row_to_site_settings(tenant_id, row) if row else None

    def _map_row_to_tenant(self, row: Mapping[str, Any]) -> Tenant:
        """Map a schools row to a Tenant entity."""
        return Tenant(
            id=TenantId(row["id"]),
            name=row.get("name"),
            domain=row.get("domain"),
            email_provider_api_key=row.get("resend_api_key"),
            sms_provider_api_key=row.get("arkesel_api_key"),
            sms_sender_id=row.get("arkesel_sender_id"),
            contact_email=row.get("email"),
            from_email=row.get("from_email"),
        )

    def _map_row_to_site_settings(self, tenant_id: TenantId, row: Mapping[str, Any]) -> TenantSiteSettings:
        """Map an app_settings row to TenantSiteSettings."""
        return TenantSiteSettings(
            tenant_id=tenant_id,
            school_name=row.get("school_name"),
            school_slogan=row.get("school_slogan"),
            homepage_hero_slides=self._parse_slides(row.get("homepage_hero_slides")),
            current_academic_year=row.get("current_academic_year"),
            school_address=row.get("school_address"),
            school_email=row.get("school_email"),
            school_phone=row.get("school_phone"),
        )

    @staticmethod
    def _parse_slides(value: Any) -> List[Dict[str, Any]]:
        # asyncpg returns json/jsonb as text unless a codec is registered
        if not value:
            return []
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                logger.warning("Ignoring malformed homepage_hero_slides value")
                return []
        return [slide for slide in value if isinstance(slide, dict)] if isinstance(value, list) else []

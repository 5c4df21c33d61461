# This file provides dependency factories for FastAPI routes.
# It exists so the store client, rate client, and upload store built at startup reach every handler by injection.
# Long-lived objects live on `app.state`; request-scoped services are cheap wrappers around them.
# Tests swap any of these through `app.dependency_overrides`.

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from legit_city.api.api_config import ApiConfig
from legit_city.api.db_access import DatabaseClient
from legit_city.api.file_store import UploadStore
from legit_city.api.services.announcement_service import AnnouncementService
from legit_city.api.services.auth_service import AuthService
from legit_city.api.services.currency_service import CurrencyRateClient
from legit_city.api.services.offering_service import OfferingService
from legit_city.api.services.plan_service import PlanService
from legit_city.api.services.subscription_service import SubscriptionService
from legit_city.api.services.work_service import WorkService


def get_config(request: Request) -> ApiConfig:
    return request.app.state.config


def get_database_client(request: Request) -> DatabaseClient:
    return request.app.state.db


def get_rate_client(request: Request) -> CurrencyRateClient:
    return request.app.state.rates


def get_upload_store(request: Request) -> UploadStore:
    return request.app.state.uploads


ConfigDep = Annotated[ApiConfig, Depends(get_config)]
DBDep = Annotated[DatabaseClient, Depends(get_database_client)]
RatesDep = Annotated[CurrencyRateClient, Depends(get_rate_client)]
UploadStoreDep = Annotated[UploadStore, Depends(get_upload_store)]


def get_auth_service(config: ConfigDep, db: DBDep) -> AuthService:
    return AuthService(config=config, db=db)


def get_plan_service(config: ConfigDep, db: DBDep, rates: RatesDep) -> PlanService:
    return PlanService(config=config, db=db, rates=rates)


def get_offering_service(db: DBDep) -> OfferingService:
    return OfferingService(db=db)


def get_announcement_service(db: DBDep) -> AnnouncementService:
    return AnnouncementService(db=db)


def get_work_service(db: DBDep, store: UploadStoreDep) -> WorkService:
    return WorkService(db=db, store=store)


def get_subscription_service(config: ConfigDep, db: DBDep) -> SubscriptionService:
    return SubscriptionService(config=config, db=db)

"""
Service Dependencies.

Per-request repositories and services, plus process-wide AI and email
services, exposed as ``Annotated`` dependencies for the API endpoints.
Tests swap the AI and email services through ``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mindpulse.ai.service import WellnessAIService, create_ai_service_from_settings
from mindpulse.core.database import get_session
from mindpulse.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from mindpulse.server.core.config import settings

from .accounts import AccountService
from .email import EmailService
from .progress import ProgressService
from .recommendations import PersonalizedRecommendationEngine


def get_repos(session: AsyncSession = Depends(get_session)) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=session)


ReposDep = Annotated[SqlRepoBundle, Depends(get_repos)]


@lru_cache
def get_ai_service() -> WellnessAIService:
    return create_ai_service_from_settings()


@lru_cache
def get_email_service() -> EmailService:
    return EmailService(settings.smtp)


def get_account_service(repos: ReposDep) -> AccountService:
    return AccountService(repos)


def get_progress_service(repos: ReposDep) -> ProgressService:
    return ProgressService(repos)


def get_recommendation_engine(repos: ReposDep) -> PersonalizedRecommendationEngine:
    return PersonalizedRecommendationEngine(repos)


AIServiceDep = Annotated[WellnessAIService, Depends(get_ai_service)]
EmailServiceDep = Annotated[EmailService, Depends(get_email_service)]
AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]
ProgressServiceDep = Annotated[ProgressService, Depends(get_progress_service)]
RecommendationEngineDep = Annotated[PersonalizedRecommendationEngine, Depends(get_recommendation_engine)]

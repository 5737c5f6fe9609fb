"""
Configuration validation for the Hacker News application.

This module provides validation functions to ensure the application
is properly configured before startup.
"""

from __future__ import annotations

from typing import Any

from .config import DEFAULT_JWT_SECRET, is_production, settings
from .database.connection import test_database_connection
from .logging import get_logger

logger = get_logger(__name__)


class ValidationError(Exception):
    """Raised when application validation fails."""

    pass


async def validate_database_connection() -> dict[str, Any]:
    """
    Validate that the database is accessible and responsive.

    Returns a dictionary with validation results and connection details.
    """
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "connection_info": None,
    }

    success, error_message = await test_database_connection()

    if success:
        results["connection_info"] = {
            "status": "connected",
            "message": "Database connection successful",
        }
        logger.info("Database connection validation successful")
    else:
        results["valid"] = False
        results["errors"].append(error_message)
        logger.error("Database connection validation failed", error=error_message)

    return results


async def validate_auth_configuration() -> dict[str, Any]:
    """
    Validate the token signing configuration.

    The placeholder secret is tolerated outside production with a warning.
    """
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "auth_info": {
            "algorithm": settings.jwt_algorithm,
            "user_id_claim": settings.jwt_user_id_claim,
            "placeholder_secret": settings.jwt_secret == DEFAULT_JWT_SECRET,
        },
    }

    if not settings.jwt_secret:
        error = "JWT secret is empty; set HACKERNEWS_JWT_SECRET"
        results["errors"].append(error)
        results["valid"] = False
        logger.error(error)
    elif settings.jwt_secret == DEFAULT_JWT_SECRET:
        if is_production():
            error = "Placeholder JWT secret used in production"
            results["errors"].append(error)
            results["valid"] = False
            logger.error(error)
        else:
            warning = "Using the placeholder JWT secret; set HACKERNEWS_JWT_SECRET"
            results["warnings"].append(warning)
            logger.warning(warning)
    else:
        logger.info("Auth validation: JWT signing secret configured")

    return results


async def validate_startup_configuration() -> dict[str, Any]:
    """
    Comprehensive startup validation.

    Called during application startup to ensure all critical configuration
    is valid.
    """
    logger.info("Starting application configuration validation")

    db_results = await validate_database_connection()
    auth_results = await validate_auth_configuration()

    combined_results = {
        "overall_valid": db_results["valid"] and auth_results["valid"],
        "database": db_results,
        "auth": auth_results,
        "environment": {
            "environment": settings.environment,
            "debug": settings.debug,
        },
    }

    if combined_results["overall_valid"]:
        logger.info("Application configuration validation completed successfully")
    else:
        logger.error(
            "Application configuration validation failed",
            errors=db_results["errors"] + auth_results["errors"],
        )

    all_warnings = db_results["warnings"] + auth_results["warnings"]
    if all_warnings:
        logger.warning("Configuration warnings detected", warnings=all_warnings)

    return combined_results


def get_startup_recommendations(validation_results: dict[str, Any]) -> list[str]:
    """
    Generate startup recommendations based on validation results.
    """
    recommendations = []

    if not validation_results.get("database", {}).get("valid", False):
        recommendations.append(
            "Database connection failed - check HACKERNEWS_DATABASE_URL and run "
            "`hackernews-migrate upgrade`"
        )
        return recommendations

    if validation_results["auth"]["auth_info"]["placeholder_secret"]:
        recommendations.append("Configure HACKERNEWS_JWT_SECRET before deploying")

    if not validation_results["overall_valid"]:
        recommendations.append("Fix configuration errors before deploying to production")

    return recommendations

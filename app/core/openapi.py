"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour
ajouter une description et documenter les conventions de l'API.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de suivi d'habitudes quotidiennes.\n\n"
            "### Conventions\n"
            "- Les dates sont des chaînes `YYYY-MM-DD`, les mois `YYYY-MM`.\n"
            "- Les erreurs ont la forme `{\"error\": \"message\"}`.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

"""
Configuration email_builder — variables d'environnement lues une fois à l'import.

  EMAIL_BUILDER_LOG_LEVEL        niveau de log de l'app FastAPI (INFO)
  EMAIL_BUILDER_CONTAINER_WIDTH  largeur par défaut du conteneur email en px (600)
  EMAIL_BUILDER_CORS_ORIGINS     origines CORS autorisées, séparées par des virgules (*)
"""
import os

LOG_LEVEL = os.getenv("EMAIL_BUILDER_LOG_LEVEL", "INFO").upper()
DEFAULT_CONTAINER_WIDTH = int(os.getenv("EMAIL_BUILDER_CONTAINER_WIDTH", "600"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("EMAIL_BUILDER_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

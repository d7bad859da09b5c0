from decouple import config

# -------------------------------
# Logging
# -------------------------------
LOG_LEVEL = config("PUBSUB_LOG_LEVEL", default="INFO").upper()
JSON_LOGS = config("JSON_LOGS", default=False, cast=bool)

# -------------------------------
# Métricas
# -------------------------------
METRICS_ENABLED = config("PUBSUB_METRICS_ENABLED", default=True, cast=bool)

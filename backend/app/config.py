from dataclasses import dataclass
from dynaconf import Dynaconf
from backend.app.constants import DEFAULTS

from condgraph.config.settings import GraphConfig, CondgraphConfig

settings = Dynaconf(
    envvar_prefix="CONDGRAPH",
    load_dotenv=True,
    settings_files=[],
)
# Environment values win over the built-in defaults.
for _key, _value in DEFAULTS.items():
    if settings.get(_key) is None:
        settings.set(_key, _value)

def _parse_csv(value):
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, str):
        return [v.strip() for v in value.split(",") if v.strip()]
    return None


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    app_name: str = settings.get("APP_NAME", "condgraph-backend")
    api_prefix: str = settings.get("API_PREFIX", "/api")

    # ---------------- Server ----------------
    host: str = settings.get("HOST", "127.0.0.1")
    port: int = settings.get("PORT", 3000)
    log_level: str = settings.get("LOG_LEVEL", "INFO")

    # ---------------- Graph Policy ----------------
    condgraph: CondgraphConfig = CondgraphConfig(
        graph=GraphConfig(
            min_title_length=settings.get("GRAPH_MIN_TITLE_LENGTH", 3),
            variable_prefix=settings.get("GRAPH_VARIABLE_PREFIX", "$"),
            operators=tuple(
                _parse_csv(settings.get("GRAPH_OPERATORS", ["AND", "OR"]))
            ),
        ),
    )

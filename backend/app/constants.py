DEFAULTS = {
    # Service title shown in the OpenAPI docs
    "APP_NAME": "condgraph-backend",
    # Prefix mounted in front of every route
    "API_PREFIX": "/api",
    # Bind address for the uvicorn entry point
    "HOST": "127.0.0.1",
    # Bind port for the uvicorn entry point
    "PORT": 3000,
    # Root log level
    "LOG_LEVEL": "INFO",
    # Minimum node title length
    "GRAPH_MIN_TITLE_LENGTH": 3,
    # Character every condition variable must start with
    "GRAPH_VARIABLE_PREFIX": "$",
    # Boolean operators accepted between condition variables
    "GRAPH_OPERATORS": ["AND", "OR"],
}

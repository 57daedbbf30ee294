PACKAGE = "strict_emitter"

NEW_LISTENER = "newListener"
REMOVE_LISTENER = "removeListener"

# Matches Node's EventEmitter.defaultMaxListeners
DEFAULT_MAX_LISTENERS = 10

MAX_LISTENERS_ENV_VAR = "STRICT_EMITTER_MAX_LISTENERS"

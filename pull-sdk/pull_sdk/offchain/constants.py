GET_PROOF_ENDPOINT = "/get_proof"

DEFAULT_TIMEOUT_IN_S = 30

# Maximum number of characters of an error body kept in exceptions & logs.
MAX_ERROR_BODY_LEN = 512

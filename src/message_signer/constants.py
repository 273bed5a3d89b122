JWS_ALGORITHM = 'EdDSA'

JWT_TYPE = 'JWT'
JOSE_TYPE = 'JOSE'
# Content type of an outer envelope whose payload is itself a signed JWT
JWT_CONTENT_TYPE = 'JWT'

JWT_ID_CLAIM = 'jti'
ISSUER_CLAIM = 'iss'
AUDIENCE_CLAIM = 'aud'
ISSUED_AT_CLAIM = 'iat'
EXPIRATION_CLAIM = 'exp'
OPERATION_CLAIM = 'op'
INITIAL_TOKEN_CLAIM = 'ijwt'
PARENT_JWT_CLAIM = 'pjwt'
BODY_CLAIM = 'body'

RESERVED_CLAIMS = frozenset([
    JWT_ID_CLAIM,
    ISSUER_CLAIM,
    AUDIENCE_CLAIM,
    ISSUED_AT_CLAIM,
    EXPIRATION_CLAIM,
    OPERATION_CLAIM,
    INITIAL_TOKEN_CLAIM,
    PARENT_JWT_CLAIM,
    BODY_CLAIM,
])

JTI_ENTROPY_BITS = 128

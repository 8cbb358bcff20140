class AppStatusCode:
    # Success
    DATA_RETRIEVED_SUCCESSFULLY = "100"

    # Request / business failures
    OPERATION_FAILED = "200"
    INVALID_INPUT = "202"
    NOT_FOUND = "205"
    ACCESS_FORBIDDEN = "206"
    CONFLICT = "207"
    DATABASE_ERROR = "208"

    # Authentication
    AUTHENTICATION_TOKEN_INVALID = "300"
    AUTHENTICATION_TOKEN_EXPIRED = "301"
    AUTHENTICATION_USER_INVALID = "302"
    AUTHENTICATION_CREDENTIALS_INVALID = "303"

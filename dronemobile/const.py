"""Constants for the DroneMobile API."""

# Vehicle API (vehicle list)
API_URL = "https://api.dronemobile.com"
VEHICLE_LIST_PATH = "/api/v1/vehicle"

# Accounts API (remote commands)
ACCOUNTS_URL = "https://accounts.dronemobile.com"
SEND_COMMAND_PATH = "/api/iot/send-command"
COMMAND_TOKEN_HEADER = "x-drone-api"
COMMAND_CONTENT_TYPE = "application/json;charset=UTF-8"

# AWS Cognito identity provider
AUTH_REGION = "us-east-1"
AUTH_CLIENT_ID = "3l3gtebtua7qft45b4splbeuiu"
AUTH_FLOW = "USER_PASSWORD_AUTH"
COGNITO_TARGET = "AWSCognitoIdentityProviderService.InitiateAuth"
COGNITO_CONTENT_TYPE = "application/x-amz-json-1.1"

# Paging
DEFAULT_LIMIT = 100
DEFAULT_OFFSET = 0

# Command keywords
CMD_REMOTE_START = "remote_start"
CMD_REMOTE_STOP = "remote_stop"
CMD_ARM = "arm"
CMD_DISARM = "disarm"
CMD_TRUNK = "trunk"
CMD_REMOTE_AUX1 = "remote_aux1"
CMD_REMOTE_AUX2 = "remote_aux2"
CMD_LOCATION = "location"


def cognito_url(region: str) -> str:
    """Return the Cognito identity provider endpoint for a region."""
    return f"https://cognito-idp.{region}.amazonaws.com"

from typing import Dict, Any

user_registration_request_schema_example: Dict[str, Any] = {
    "email": "john.doe@example.com",
    "name": "John Doe",
    "password": "password123"
}

user_response_schema_example: Dict[str, Any] = {
    "id": 1,
    "email": "john.doe@example.com",
    "name": "John Doe",
    "role": "CUSTOMER",
    "createdAt": "2024-01-15T10:30:00Z"
}

user_login_request_schema_example: Dict[str, Any] = {
    "email": "john.doe@example.com",
    "password": "password123"
}

user_login_response_schema_example: Dict[str, Any] = {
    "token": "eyJhbGciOiJIUzM4NCIsInR5cCI6IkpXVCJ9.eyJzdWIiOiIxIiwidXNlcl9pZCI6MSwiZW1h"
             "aWwiOiJqb2huLmRvZUBleGFtcGxlLmNvbSIsInJvbGUiOiJDVVNUT01FUiJ9.Ej8Ej8Ej8Ej8"
             "Ej8Ej8Ej8Ej8Ej8Ej8Ej8",
    "tokenType": "bearer",
    "email": "john.doe@example.com",
    "name": "John Doe",
    "role": "CUSTOMER"
}

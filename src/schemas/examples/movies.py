from typing import Dict, Any

movie_request_schema_example: Dict[str, Any] = {
    "title": "Inception",
    "description": "A thief who steals corporate secrets through dream-sharing technology",
    "genre": "Sci-Fi",
    "durationMinutes": 148,
    "price": 12.5
}

movie_schema_example: Dict[str, Any] = {
    "id": 1,
    **movie_request_schema_example
}

from typing import Dict, Any

booking_create_request_schema_example: Dict[str, Any] = {
    "movieId": 1,
    "customerName": "John Doe",
    "customerEmail": "john.doe@example.com",
    "numberOfSeats": 2
}

booking_schema_example: Dict[str, Any] = {
    "id": 1,
    "movieId": 1,
    "customerName": "John Doe",
    "customerEmail": "john.doe@example.com",
    "numberOfSeats": 2,
    "bookingTime": "2024-01-15T18:45:00Z",
    "totalPrice": 25.0
}

# stayvista/core/error_messages.py


class ErrorMessages:
    UNAUTHORIZED = "unauthorized access"
    TOKEN_EXPIRED = "Token has expired"
    FORBIDDEN = "forbidden access"
    SELF_ROLE_CHANGE = "You can't change your own role"
    NOT_ROOM_OWNER = "Only the owning host can modify this room"
    NOT_BOOKING_PARTY = "Only the guest or host of this booking can remove it"
    OTHER_USER_DATA = "You can only access your own data"
    BOOKING_FOR_OTHER = "Bookings must be made for the signed-in guest"

    USER_NOT_FOUND = "User not found"
    ROOM_NOT_FOUND = "Room not found"
    BOOKING_NOT_FOUND = "Booking not found"

    INVALID_ID = "Invalid id"
    INVALID_PRICE = "Price must be at least one cent"
    INVALID_WINDOW = "'to' must not be before 'from'"
    ROOM_ALREADY_BOOKED = "Room is already booked"

    PAYMENT_FAILED = "Payment authorization failed"

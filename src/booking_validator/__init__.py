"""Validator for partner implementations of the Hotel Booking API.

Sends sample BookingAvailability and BookingSubmit requests to a partner
server and checks that each response is complete, well formatted and
consistent with the request.
"""

__version__ = "0.1.0"

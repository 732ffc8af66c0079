# API Route Constants

# Base API
API_BASE = '/api'

# Service catalog routes
SERVICE_BASE = f'{API_BASE}/services'
SERVICE_LIST = SERVICE_BASE
SERVICE_GET = f'{SERVICE_BASE}/{{service_id}}'
SERVICE_SLOTS = f'{SERVICE_BASE}/{{service_id}}/slots'

# Slot routes
SLOT_BASE = f'{API_BASE}/slots'
SLOT_AVAILABLE = f'{SLOT_BASE}/available'

# Booking routes
BOOKING_BASE = f'{API_BASE}/bookings'
BOOKING_CREATE = BOOKING_BASE
BOOKING_LIST = BOOKING_BASE
BOOKING_GET = f'{BOOKING_BASE}/{{booking_id}}'
BOOKING_CANCEL = f'{BOOKING_BASE}/{{booking_id}}/cancel'

# Statistics routes
STATS = f'{API_BASE}/stats'

# Real-time event routes
EVENT_BASE = f'{API_BASE}/events'
EVENT_STREAM = f'{EVENT_BASE}/stream'

# API Route Constants

API_BASE = '/api'

# Booking routes
BOOKING_BASE = f'{API_BASE}/booking'
BOOKING_CREATE = f'{BOOKING_BASE}/create'
BOOKING_GET = f'{BOOKING_BASE}/{{booking_id}}'
BOOKING_STATUS = f'{BOOKING_BASE}/{{booking_id}}/status'

# Order routes
ORDER_BASE = f'{API_BASE}/orders'
ORDER_LIST = ORDER_BASE
ORDER_STATS = f'{ORDER_BASE}/stats'
ORDER_EXPORT = f'{ORDER_BASE}/export'
ORDER_DELETE = f'{ORDER_BASE}/{{order_id}}'

# Admin routes
ADMIN_BASE = f'{API_BASE}/admin'
ADMIN_BOOKINGS = f'{ADMIN_BASE}/bookings'
ADMIN_PRODUCTS = f'{ADMIN_BASE}/products'
ADMIN_PRODUCT_DATES = f'{ADMIN_PRODUCTS}/{{product_id}}/dates'
ADMIN_PRODUCT_DATE = f'{ADMIN_PRODUCTS}/{{product_id}}/dates/{{date_id}}'

# System routes
ROOT = '/'
HEALTH = '/health'

# messages.py
# User-facing strings. The frontend is Persian, so every message returned
# in a JSON body comes from here.

LOGIN_SUCCESS = 'ورود موفقیت‌آمیز'
LOGIN_FAILED = 'رمز عبور اشتباه است'
UNAUTHORIZED = 'دسترسی غیرمجاز - رمز عبور اشتباه است'

SAVE_SUCCESS = 'داده‌ها با موفقیت ذخیره شد'
SAVE_FAILED = 'خطا در ذخیره داده‌ها'
LOAD_FAILED = 'خطا در بارگذاری داده‌ها'
RECORD_NOT_FOUND = 'داده‌ای یافت نشد'

SERVER_ALIVE = 'سرور فعال است'
INTERNAL_ERROR = 'خطای داخلی سرور'
ROUTE_NOT_FOUND = 'صفحه مورد نظر یافت نشد'

STORAGE_INIT_FAILED = 'خطا در راه‌اندازی پایگاه داده'

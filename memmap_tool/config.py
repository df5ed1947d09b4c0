# config.py
APP_NAME = "memmap"

# TI CC2340R5: 500 КБ flash (0x7D000), 36 КБ SRAM (0x9000)
DEVICE_NAME = "TI CC2340R5"
FLASH_TOTAL = 512000
RAM_TOTAL = 36864

# Пороги, проценты от ёмкости региона
WARN_THRESHOLD = 75
CRITICAL_THRESHOLD = 90

DEFAULT_TOP_COUNT = 10

# Секция кода в map-файле TI (заголовок листинга функций)
CODE_SECTION = ".text"

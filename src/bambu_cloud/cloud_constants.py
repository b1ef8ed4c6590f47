# Fixed endpoints of the vendor cloud

API_BASE_URL_CHINA: str = "https://api.bambulab.cn"
API_BASE_URL_GLOBAL: str = "https://api.bambulab.com"

MQTT_HOST_CHINA: str = "cn.mqtt.bambulab.com"
MQTT_HOST_GLOBAL: str = "us.mqtt.bambulab.com"

# Paths, relative to the regional API base URL
LOGIN_PATH: str = "v1/user-service/user/login"
PROFILE_PATH: str = "v1/user-service/my/profile"
TASKS_PATH: str = "v1/user-service/my/tasks"
DEVICES_PATH: str = "v1/iot-service/api/user/bind"
CAMERA_TICKET_PATH: str = "v1/iot-service/api/user/ttcode"

CAMERA_URL_SCHEME: str = "bambu"

# Statuses worth retrying at the transport level
RETRY_STATUS_FORCELIST: tuple[int, ...] = (429, 500, 502, 503, 504)

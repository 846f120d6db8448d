import os


def get_host_for_locust_testing():
    working_dir = os.getenv("WORKING_DIR", "")
    if working_dir == "/app/":
        return "http://web:5000"
    return os.getenv("LOCUST_HOST", "http://localhost:5000")

import platform
import time

import cpuinfo
import psutil

from constants.string_constants import DATE_FORMAT


def get_cpu_info():
    """Returns CPU info using py-cpuinfo."""
    try:
        cpu_info = cpuinfo.get_cpu_info()
        return cpu_info['brand_raw']
    except Exception as e:
        return f"Error: {e}"


def get_cpu_cores():
    try:
        return f"{psutil.cpu_count(logical=False)} physical, {psutil.cpu_count(logical=True)} logical"
    except Exception as e:
        return f"Error: {e}"


def get_ram_info():
    """Returns RAM info using psutil."""
    try:
        ram = psutil.virtual_memory()
        return f"Total: {ram.total / (1024 ** 3):.2f} GB, Available: {ram.available / (1024 ** 3):.2f} GB"
    except Exception as e:
        return f"Error: {e}"


def write_system_info(file):
    file.write("[System Info]\n")
    file.write(f"Timestamp: {time.strftime(DATE_FORMAT)}\n")
    file.write(f"CPU: {get_cpu_info()}\n")
    file.write(f"CPU Cores: {get_cpu_cores()}\n")
    file.write(f"RAM: {get_ram_info()}\n")
    file.write(f"Python: {platform.python_version()} ({platform.python_implementation()})\n")


def get_formatted_elapsed_time(start_time):
    elapsed_time = time.time() - start_time
    formatted_time = time.strftime("%H:%M:%S", time.gmtime(elapsed_time))
    return formatted_time

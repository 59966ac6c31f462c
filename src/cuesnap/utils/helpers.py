"""General utility functions"""
import sys
import time
import threading
import subprocess


def safe_print(msg):
    """Print with handling for surrogate characters that can't be encoded"""
    try:
        print(msg)
    except UnicodeEncodeError:
        # Replace problematic characters with safe representation
        safe_msg = msg.encode('utf-8', errors='replace').decode('utf-8')
        print(safe_msg)
    sys.stdout.flush()


def make_logger(prefix=None, logfile=None):
    """
    Build a log function that prints timestamped messages.

    Args:
        prefix: Optional tag put in front of every message
        logfile: Optional path; messages are appended to it as well

    Returns:
        Function taking a single message argument
    """
    log_lock = threading.Lock()

    def log(msg):
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
        if prefix:
            formatted_msg = f"[{timestamp}] [{prefix}] {msg}"
        else:
            formatted_msg = f"[{timestamp}] {msg}"
        with log_lock:
            safe_print(formatted_msg)
            if logfile:
                with open(logfile, "a", encoding="utf-8", errors="replace") as f:
                    f.write(formatted_msg + "\n")
                    f.flush()

    return log


def run_command(cmd, logfile=None, env=None):
    """
    Execute a shell command line and wait for it to exit.

    Args:
        cmd: Command line, already quoted for the shell
        logfile: Optional path to a log file for the command's output;
            without it the output goes to the terminal
        env: Optional environment variables dict

    Returns:
        Exit code of the command
    """
    if logfile is None:
        result = subprocess.run(cmd, shell=True, check=False, env=env)
        return result.returncode

    with open(logfile, "a", encoding="utf-8", errors="replace") as f:
        f.write(f"\n$ {cmd}\n")
        f.flush()
        result = subprocess.run(cmd, shell=True, stdout=f, stderr=f, check=False, env=env)
        f.write(f"[Exit code: {result.returncode}]\n")
        f.flush()
        return result.returncode

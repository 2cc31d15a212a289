import hls_relay.web_server
import hls_relay.config as config
import os, sys, logging

# CONFIGURE LOGGING
log_file_path = os.path.join(config.LOG_DIR, f"{config.APP}.log")
os.makedirs(os.path.dirname(log_file_path), exist_ok=True)

stdout_handler = logging.StreamHandler(sys.stdout)
stdout_handler.setLevel(logging.INFO)
file_handler = logging.FileHandler(filename=log_file_path, encoding='utf-8')

logging.basicConfig(handlers=[stdout_handler, file_handler],
                    format='%(levelname)s:%(message)s',
                    level=logging.DEBUG)

logger = logging.getLogger(__name__)
logger.info(f"{config.APP} started, logging to {log_file_path}")

def main():
    ws = hls_relay.web_server.WebServer()
    ws.start()

if __name__ == '__main__':
    main()

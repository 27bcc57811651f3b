"""Static paths, modes and names shared by the VPN daemon, CLI and fileshare daemon."""

from __future__ import annotations

# -- socket activation --------------------------------------------------------

LISTEN_PID = "LISTEN_PID"
LISTEN_FDS = "LISTEN_FDS"
LISTEN_FDNAMES = "LISTEN_FDNAMES"

# First descriptor handed over by a socket-activation supervisor.
LISTEN_FDS_START = 3

PROTO = "unix"

# -- system directories -------------------------------------------------------

TEMP_DIR = "/tmp/"
RUN_DIR = "/run/nordvpn/"
USER_RUN_DIR = "/run/user"
LOG_DIR = "/var/log/nordvpn/"

APP_NAME = "nordvpn"
NORDVPN_GROUP = "nordvpn"
DAEMON_SOCKET = RUN_DIR + "nordvpnd.sock"

# -- permission modes ---------------------------------------------------------

PERM_USER_RWX = 0o700
PERM_USER_RW = 0o600
PERM_USER_RW_GROUP_RW = 0o660
PERM_USER_RW_GROUP_R_OTHERS_R = 0o644
PERM_USER_RW_GROUP_RW_OTHERS_R = 0o664
PERM_USER_RW_GROUP_RW_OTHERS_RW = 0o666
PERM_USER_RWX_GROUP_RX_OTHERS_RX = 0o755

# -- executables --------------------------------------------------------------

CHATTR_EXEC = "chattr"
COLUMN_EXEC = "column"
STTY_EXEC = "stty"
SYSTEMCTL_EXEC = "systemctl"
NETWORKCTL_EXEC = "networkctl"
IPTABLES_EXEC = "iptables"
IP6TABLES_EXEC = "ip6tables"

# API timestamps, strftime form.
SERVER_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# -- fileshare daemon ---------------------------------------------------------

FILESHARED = "nordfileshared"
FILESHARED_LOG_FILE = FILESHARED + ".log"

# Only nordfileshared builds this by hand; everything running as the user
# should go through the regular XDG lookup instead.
CONFIG_DIR_NAME = ".config"
FILESHARE_HISTORY_FILE = "fileshare_history.db"

# -- application data ---------------------------------------------------------

USER_DATA_PATH = APP_NAME + "/"
RESOLVCONF_FILE_PATH = "/etc/resolv.conf"
APP_DATA_PATH = "/var/lib/nordvpn/"
DAT_FILES_PATH = APP_DATA_PATH + "data/"
BAK_FILES_PATH = APP_DATA_PATH + "backup/"
CLI_LOG_FILE_PATH = USER_DATA_PATH + "cli.log"
OVPN_TEMPLATE_PATH = DAT_FILES_PATH + "ovpn_template.xslt"
OVPN_OBFS_TEMPLATE_PATH = DAT_FILES_PATH + "ovpn_xor_template.xslt"

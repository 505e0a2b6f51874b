#!/usr/bin/env python3
"""
Server start script.
Development mode (Flask) and production mode (gunicorn).
"""

import os
import sys
import argparse
import subprocess

APP_TARGET = "server:create_app()"


def start_dev(port):
    """Flask built-in development server"""
    print("=" * 60)
    print("Starting development server (Flask)")
    print("=" * 60)

    from server import create_app
    create_app().run(host='0.0.0.0', port=port, debug=True)


def start_prod():
    """Production server (gunicorn), configured by gunicorn.conf.py"""
    worker_class = os.environ.get("LL1_WORKER_CLASS", "sync")
    print("=" * 60)
    print(f"Starting production server (Gunicorn, {worker_class} workers)")
    print("=" * 60)

    try:
        import gunicorn
        print(f"Gunicorn {gunicorn.__version__}")
        if worker_class == "gevent":
            import gevent
            print(f"Gevent {gevent.__version__}")
    except ImportError as e:
        print(f"Missing dependency: {e}")
        print("Install the server extras: pip install -e .[server]")
        sys.exit(1)

    cmd = [
        sys.executable, "-m", "gunicorn",
        "-c", "gunicorn.conf.py",
        APP_TARGET
    ]
    return subprocess.run(cmd).returncode


def start_prod_simple(port):
    """Production server from command line flags only, ignoring gunicorn.conf.py"""
    print("=" * 60)
    print("Starting production server (Gunicorn, no config file)")
    print("=" * 60)

    cmd = [
        sys.executable, "-m", "gunicorn",
        "-w", "4",
        "-b", f"0.0.0.0:{port}",
        "--timeout", "60",
        "--access-logfile", "-",
        "--error-logfile", "-",
        "--log-level", "info",
        APP_TARGET
    ]
    return subprocess.run(cmd).returncode


def main():
    parser = argparse.ArgumentParser(description='LL(1) grammar analysis API server')
    parser.add_argument(
        'mode',
        choices=['dev', 'prod', 'prod-simple'],
        default='dev',
        nargs='?',
        help='run mode: dev=development, prod=production (recommended), prod-simple=production without gunicorn.conf.py'
    )
    parser.add_argument('-p', '--port', type=int, default=5000, help='port for dev and prod-simple modes')

    args = parser.parse_args()

    if args.mode == 'dev':
        start_dev(args.port)
    elif args.mode == 'prod':
        sys.exit(start_prod())
    elif args.mode == 'prod-simple':
        sys.exit(start_prod_simple(args.port))


if __name__ == '__main__':
    main()

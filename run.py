#!/usr/bin/env python3
"""
Problem Service API
起動スクリプト

使用方法:
    python run.py [--port PORT] [--host HOST] [--reload]

例:
    python run.py
    python run.py --port 8080
    python run.py --host 0.0.0.0 --port 8000 --reload
"""

import argparse
import sys

import uvicorn


def build_parser():
    parser = argparse.ArgumentParser(description='Problem Service API')
    parser.add_argument('--host', default='localhost', help='ホストアドレス (デフォルト: localhost)')
    parser.add_argument('--port', type=int, default=8000, help='ポート番号 (デフォルト: 8000)')
    parser.add_argument('--reload', action='store_true', help='コード変更時に自動で再起動')
    return parser


def main(argv=None):
    """アプリケーションを起動"""
    args = build_parser().parse_args(argv)

    print("=" * 60)
    print("Problem Service API")
    print(f"URL: http://{args.host}:{args.port}")
    print("=" * 60)

    try:
        uvicorn.run(
            "problem_service.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
    except KeyboardInterrupt:
        print("\nアプリケーションを停止しました")
        sys.exit(0)


if __name__ == '__main__':
    main()

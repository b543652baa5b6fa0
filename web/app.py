"""
web/app.py

Flask API для Marble Solitaire Solver.
"""

import os
import sys
import time

from flask import Flask, jsonify, request

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.board import Board
from marble_io import board_rows, board_to_string, format_move, move_to_dict
from solvers import MarbleSolitaireSolver
from utils.error_handling import InvalidBoardError, safe_solve
from utils.logging import get_logger


def create_app(solver_factory=MarbleSolitaireSolver):
    """
    Создаёт Flask приложение.

    Args:
        solver_factory: вызываемый объект без аргументов, возвращающий решатель
    """
    app = Flask(__name__)
    logger = get_logger()

    @app.route('/api/board', methods=['GET'])
    def board():
        """Стартовая позиция."""
        start = Board.standard()
        return jsonify({
            'board': board_to_string(start),
            'rows': board_rows(start),
            'marbles': start.marble_count(),
        })

    @app.route('/api/solve', methods=['POST'])
    def solve():
        """
        API для решения головоломки.

        Входные данные (необязательно):
        {
            "board": "0022200..."  // 49 цифр 0/1/2, по умолчанию стартовая
        }
        """
        data = request.get_json(silent=True) or {}

        solver = solver_factory()
        solver.reset()
        if data.get('board'):
            try:
                custom = Board.from_string(str(data['board']))
            except InvalidBoardError as e:
                return jsonify({'success': False, 'error': str(e)}), 400
            solver.board.restore(custom.snapshot())

        logger.info(f"Solve request: marbles={solver.board.marble_count()}")

        start_time = time.perf_counter()
        moves = safe_solve(solver)
        elapsed = time.perf_counter() - start_time

        if moves is None:
            return jsonify({
                'success': False,
                'error': 'Решение не найдено',
                'elapsed': elapsed,
                'stats': solver.stats.to_dict(),
            })

        return jsonify({
            'success': True,
            'count': len(moves),
            'moves': [move_to_dict(m) for m in moves],
            'lines': [format_move(m) for m in moves],
            'elapsed': elapsed,
            'stats': solver.stats.to_dict(),
        })

    return app


if __name__ == '__main__':
    create_app().run(debug=False, port=int(os.environ.get('PORT', 5000)))

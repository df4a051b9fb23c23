from .models import Game, GameStatus, empty_holes, new_game_id

__all__ = ["Game", "GameStatus", "empty_holes", "new_game_id"]

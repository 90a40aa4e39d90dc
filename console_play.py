from connect4.core.board import Cell
from connect4.core.rules import winning_cells
from connect4.app.core.settings import settings, configure_logging
from connect4.app.engine.game import ConnectFour


def main():
    configure_logging(settings)

    print("=======================================")
    print("   CONNECT FOUR: Human vs Negamax")
    print("=======================================")

    game = ConnectFour(ai_player=settings.ai_cell, search_depth=settings.search_depth)
    names = {
        Cell.PLAYER_A: "X (Player 1)",
        Cell.PLAYER_B: "O (Player 2)",
    }

    print(game.get_visual_board())

    while not game.is_over():

        # --- Engine Turn ---
        if game.is_ai_turn:
            print("\nAI is thinking...")
            col = game.update_ai()
            print(f"AI plays Column: {col}")

        # --- Human Turn ---
        else:
            valid_moves = game.get_valid_moves()
            try:
                user_input = input(f"\n{names[game.current_turn]} move (Columns {valid_moves}): ")
                col = int(user_input)
            except ValueError:
                print("Please enter a valid number.")
                continue
            except (EOFError, KeyboardInterrupt):
                print("\nBye.")
                return

            if not game.drop_piece(col):
                print("Invalid column. Try again.")
                continue

        # Show Board
        print("\n" + game.get_visual_board())

    # --- End Game ---
    if game.winner is not None:
        winner_name = "AI" if game.winner == game.ai_player else names[game.winner]
        print(f"\nGame Over! Winner: {winner_name}")
        line = ", ".join(f"({c},{r})" for c, r in winning_cells(game.board))
        print(f"Winning line (col,row): {line}")
    else:
        print("\nGame Over! It's a Draw.")


if __name__ == "__main__":
    main()

from tictactoe.app import main

main()

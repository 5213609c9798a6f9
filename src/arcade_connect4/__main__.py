from arcade_connect4.main import main

main()

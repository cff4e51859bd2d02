from create_velist.cli import main

main()

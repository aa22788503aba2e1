from cbuild.cli.app import main

main()

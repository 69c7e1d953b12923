from nebula_keybind_menu.cli_commands import main

if __name__ == '__main__':
    main()
